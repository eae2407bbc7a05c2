from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable


class RecordingHandler:
    """Mock transport handler that records the requests it receives.

    Args:
        status_code: The status code of every response.
        content: The body of every response.
        headers: Optional headers of every response.
    """

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = headers
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Create a factory of recording handlers."""
    return RecordingHandler


@pytest.fixture
def handler() -> RecordingHandler:
    """Create a handler answering 200 with a small JSON body."""
    return RecordingHandler(content=b'{"ok": true}')


@pytest.fixture
def transport(handler: RecordingHandler) -> httpx.MockTransport:
    """Create a mock transport backed by ``handler``.

    ``httpx.MockTransport`` implements both the sync and async transport
    interfaces, so the same fixture serves both kinds of helpers.
    """
    return httpx.MockTransport(handler)


@pytest.fixture(autouse=True)
def _no_env_proxies(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove proxy environment variables so that requests reach the
    mock transports."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
