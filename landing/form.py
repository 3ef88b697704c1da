"""
Client side of the contact form.

`ContactForm` mirrors what the landing page does in the browser: it keeps the
four input fields, posts them to the contact endpoint on submit and tracks the
form status (idle, submitting, success, error). After a success or an error
the status falls back to idle once `reset_delay` seconds have passed.
"""

import asyncio
from enum import Enum
from typing import Callable

from httpx import AsyncClient

from .logger import get_logger


logger = get_logger(__name__)


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


NOTICES: dict[FormStatus, str] = {
    FormStatus.SUCCESS: "Message sent successfully! We'll get back to you soon.",
    FormStatus.ERROR: "Failed to send message. Please try again.",
}

FIELDS = ("name", "email", "company", "message")


class ContactForm:
    def __init__(self, *, endpoint: str = "/api/contact", reset_delay: float = 3) -> None:
        self.endpoint = endpoint
        self.reset_delay = reset_delay

        self.name = ""
        self.email = ""
        self.company = ""
        self.message = ""

        self._status = FormStatus.IDLE
        self._listeners: list[Callable[[FormStatus], None]] = []
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def status(self) -> FormStatus:
        return self._status

    @property
    def notice(self) -> str | None:
        """Text to show below the submit button, if any."""

        return NOTICES.get(self._status)

    def on_status_change(self, callback: Callable[[FormStatus], None]) -> None:
        self._listeners.append(callback)

    def payload(self) -> dict[str, str]:
        return {field: getattr(self, field) for field in FIELDS}

    def clear(self) -> None:
        for field in FIELDS:
            setattr(self, field, "")

    async def submit(self, client: AsyncClient) -> FormStatus:
        """
        Post the current field values to the contact endpoint.

        Any 2xx response counts as success and clears the fields. Every other
        response and every exception raised while sending counts as an error
        and keeps them.
        """

        self._cancel_reset()
        self._set_status(FormStatus.SUBMITTING)

        try:
            response = await client.post(self.endpoint, json=self.payload())
        except Exception as e:
            logger.error(f"Error submitting form: {e!r}")
            return self._finish(FormStatus.ERROR)

        if not response.is_success:
            return self._finish(FormStatus.ERROR)

        self.clear()
        return self._finish(FormStatus.SUCCESS)

    def _finish(self, status: FormStatus) -> FormStatus:
        self._set_status(status)
        self._reset_handle = asyncio.get_running_loop().call_later(self.reset_delay, self._set_status, FormStatus.IDLE)
        return status

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _set_status(self, status: FormStatus) -> None:
        self._status = status
        for callback in self._listeners:
            callback(status)
