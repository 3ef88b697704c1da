import json

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch
from pytest_mock import MockerFixture

from landing.services import resend
from landing.settings import settings

from ..conftest import ProviderMock


async def test__send_email(mock_resend: ProviderMock, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "resend_api_key", "re_123")
    monkeypatch.setattr(settings, "resend_api_url", "https://resend.test/emails")
    monkeypatch.setattr(settings, "contact_from", "Website <noreply@example.com>")
    requests = mock_resend(httpx.Response(200, json={"id": "abc"}))

    result = await resend.send_email(["a@example.com", "b@example.com"], "Hello", "<p>Hi</p>", reply_to="c@example.com")

    assert result == {"id": "abc"}
    [request] = requests
    assert str(request.url) == "https://resend.test/emails"
    assert request.headers["Authorization"] == "Bearer re_123"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "from": "Website <noreply@example.com>",
        "to": ["a@example.com", "b@example.com"],
        "subject": "Hello",
        "html": "<p>Hi</p>",
        "reply_to": "c@example.com",
    }


async def test__send_email__without_reply_to(mock_resend: ProviderMock) -> None:
    requests = mock_resend(httpx.Response(200, json={"id": "abc"}))

    await resend.send_email(["a@example.com"], "Hello", "<p>Hi</p>")

    assert "reply_to" not in json.loads(requests[0].content)


@pytest.mark.parametrize(
    "response,message",
    [
        (
            httpx.Response(422, json={"name": "validation_error", "message": "Invalid `from` field"}),
            "Invalid `from` field",
        ),
        (httpx.Response(429, text='{"name": "rate_limit_exceeded"}'), '{"name": "rate_limit_exceeded"}'),
        (httpx.Response(503, text="Service Unavailable"), "Service Unavailable"),
        (httpx.Response(500, text='["oops"]'), '["oops"]'),
    ],
)
async def test__send_email__error(response: httpx.Response, message: str, mock_resend: ProviderMock) -> None:
    mock_resend(response)

    with pytest.raises(resend.ResendError) as exc_info:
        await resend.send_email(["a@example.com"], "Hello", "<p>Hi</p>")

    assert exc_info.value.status_code == response.status_code
    assert exc_info.value.message == message


async def test__send_email__transport_error(mock_resend: ProviderMock) -> None:
    mock_resend(httpx.ReadTimeout("timed out"))

    with pytest.raises(httpx.ReadTimeout):
        await resend.send_email(["a@example.com"], "Hello", "<p>Hi</p>")


async def test__send_email__does_not_log_subject(
    mock_resend: ProviderMock, mocker: MockerFixture, monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "contact_from", "Website <noreply@example.com>")
    debug = mocker.patch.object(resend.logger, "debug")
    mock_resend(httpx.Response(200, json={"id": "abc"}))

    await resend.send_email(["a@example.com"], "New Contact Form Submission from Jane", "<p>Hi</p>")

    debug.assert_called_once_with("Sending email to a@example.com")
