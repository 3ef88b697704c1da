from typing import Any, cast

from httpx import AsyncClient, Response

from ..logger import get_logger
from ..settings import settings


logger = get_logger(__name__)


class ResendError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Resend responded with status {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(resp: Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text


async def send_email(recipients: list[str], subject: str, html: str, *, reply_to: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"from": settings.contact_from, "to": recipients, "subject": subject, "html": html}
    if reply_to:
        payload["reply_to"] = reply_to

    headers = {"Authorization": f"Bearer {settings.resend_api_key}"} if settings.resend_api_key else {}

    logger.debug(f"Sending email to {', '.join(recipients)}")

    async with AsyncClient() as client:
        resp = await client.post(settings.resend_api_url, json=payload, headers=headers)

    if not resp.is_success:
        raise ResendError(resp.status_code, _error_message(resp))

    return cast(dict[str, Any], resp.json())
