r"""Unit tests for the asynchronous dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from httpwrap import HttpResult, ResourceError, send_request_async

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from tests.conftest import RecordingHandler

TEST_URL = "https://api.example.com/data"


class FailingAsyncStream(httpx.AsyncByteStream):
    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield b"partial"
        raise httpx.ReadError("connection reset")


def redirect_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/old":
        return httpx.Response(302, headers={"Location": "/new"})
    return httpx.Response(200, content=b'{"ok": true}')


########################################
#     Tests for send_request_async     #
########################################


@pytest.mark.asyncio
async def test_send_request_async_success(
    handler: RecordingHandler, transport: httpx.MockTransport
) -> None:
    result = await send_request_async("GET", TEST_URL, transport=transport)
    assert isinstance(result, HttpResult)
    assert result.status_code == 200
    assert result.content == b'{"ok": true}'
    assert handler.last_request.method == "GET"


@pytest.mark.asyncio
async def test_send_request_async_request(
    handler: RecordingHandler, transport: httpx.MockTransport
) -> None:
    headers = {"Accept": "application/json"}
    await send_request_async(
        "put",
        "https://api.example.com/items?z=1&a=2",
        b"payload",
        headers=headers,
        cookies={"session": "abc"},
        token="Bearer abc",
        transport=transport,
    )
    request = handler.last_request
    assert request.method == "PUT"
    assert str(request.url) == "https://api.example.com/items?a=2&z=1"
    assert request.content == b"payload"
    assert request.headers["accept"] == "application/json"
    assert request.headers["authorization"] == "Bearer abc"
    assert request.headers["cookie"] == "session=abc"
    assert headers == {"Accept": "application/json"}


@pytest.mark.asyncio
async def test_send_request_async_transport_error() -> None:
    exc = httpx.ConnectError("Connection refused")
    transport = httpx.MockTransport(Mock(side_effect=exc))
    with pytest.raises(ResourceError) as exc_info:
        await send_request_async("GET", TEST_URL, transport=transport)
    assert exc_info.value.status_code == 0
    assert exc_info.value.cause is exc


@pytest.mark.asyncio
async def test_send_request_async_read_error() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, stream=FailingAsyncStream())
    )
    with pytest.raises(ResourceError) as exc_info:
        await send_request_async("GET", TEST_URL, transport=transport)
    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_send_request_async_error_status(
    make_handler: Callable[..., RecordingHandler],
) -> None:
    handler = make_handler(status_code=404, content=b'"not found"')
    with pytest.raises(ResourceError) as exc_info:
        await send_request_async("GET", TEST_URL, transport=httpx.MockTransport(handler))
    assert exc_info.value.status_code == 404
    assert exc_info.value.body == ""
    assert exc_info.value.content == b'"not found"'


@pytest.mark.asyncio
async def test_send_request_async_timeout(transport: httpx.MockTransport) -> None:
    with patch("httpwrap.dispatch_async.httpx.AsyncClient", wraps=httpx.AsyncClient) as client_cls:
        await send_request_async("GET", TEST_URL, transport=transport, timeout=-5)
    assert client_cls.call_args.kwargs["timeout"] == 30.0


@pytest.mark.asyncio
async def test_send_request_async_closes_owned_client_on_error() -> None:
    client = Mock(spec=httpx.AsyncClient, aclose=AsyncMock())
    client.build_request.side_effect = ValueError("bad request")
    with (
        patch("httpwrap.dispatch_async.httpx.AsyncClient", return_value=client),
        pytest.raises(ResourceError),
    ):
        await send_request_async("GET", TEST_URL)
    client.aclose.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_send_request_async_keeps_caller_transport_open(handler: RecordingHandler) -> None:
    transport = httpx.MockTransport(handler)
    transport.aclose = AsyncMock()
    await send_request_async("GET", TEST_URL, transport=transport)
    transport.aclose.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_request_async_follows_redirects() -> None:
    result = await send_request_async(
        "GET", "https://api.example.com/old", transport=httpx.MockTransport(redirect_handler)
    )
    assert result.status_code == 200
    assert result.content == b'{"ok": true}'
