from functools import partial
from typing import AsyncIterator, Callable

import httpx
import pytest
from pytest_mock import MockerFixture

from landing.app import app


ProviderMock = Callable[[httpx.Response | Exception], list[httpx.Request]]


@pytest.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as c:
        yield c


@pytest.fixture
def mock_resend(mocker: MockerFixture) -> ProviderMock:
    """Replace the email provider with a fixed response (or error) and record the requests sent to it."""

    def install(response: httpx.Response | Exception) -> list[httpx.Request]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if isinstance(response, Exception):
                raise response
            return response

        transport = httpx.MockTransport(handler)
        mocker.patch("landing.services.resend.AsyncClient", partial(httpx.AsyncClient, transport=transport))
        return requests

    return install
