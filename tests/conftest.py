"""Pytest fixtures for circle-w3s tests."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

TEST_API_KEY = "TEST_API_KEY:abc123:def456"
TEST_BASE_URL = "https://api.test.circle.local"


class RecordingTransport:
    """Mock HTTP transport that records requests and replays queued responses.

    With nothing queued it answers ``200 {"data": {}}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Callable[[httpx.Request], httpx.Response]] = []
        self.transport = httpx.MockTransport(self._handle)

    def reply(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Queue one response."""

        def _respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content, headers=headers)
            return httpx.Response(status_code, json=json_body, headers=headers)

        self._responses.append(_respond)

    def reply_data(self, data: Any, status_code: int = 200) -> None:
        """Queue a success envelope wrapping *data*."""
        self.reply(status_code, {"data": data})

    def raise_error(self, exc: Exception) -> None:
        """Queue a transport-level failure."""

        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._responses.append(_raise)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)(request)
        return httpx.Response(200, json={"data": {}})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def api() -> RecordingTransport:
    """Recording mock of the Circle API."""
    return RecordingTransport()


@pytest.fixture
def make_client(api: RecordingTransport):
    """Factory building a surface client wired to the mock API."""

    def _make(client_cls, **kwargs):
        return client_cls(TEST_API_KEY, TEST_BASE_URL, transport=api.transport, **kwargs)

    return _make
