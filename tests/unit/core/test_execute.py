from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from httpwrap import HttpResult, RequestConfig, ResourceError, ResponseDecodeError
from httpwrap.core import CONTENT_TYPE_JSON, execute_request, execute_request_async
from httpwrap.core.execute import decode_result
from httpwrap.serialization import decode_json

TEST_URL = "https://api.example.com/data"


###################################
#     Tests for decode_result     #
###################################


def test_decode_result_without_result_type() -> None:
    decoder = Mock()
    result = HttpResult(status_code=200, content=b'{"a": 1}')
    assert decode_result(result, decoder, None) is result
    decoder.assert_not_called()


def test_decode_result_empty_content() -> None:
    decoder = Mock()
    result = HttpResult(status_code=200, content=b"")
    assert decode_result(result, decoder, dict) is result
    decoder.assert_not_called()


def test_decode_result() -> None:
    decoder = Mock(return_value={"a": 1})
    result = decode_result(
        HttpResult(status_code=201, content=b"x", url=TEST_URL), decoder, dict
    )
    assert result.data == {"a": 1}
    decoder.assert_called_once_with(b"x", dict, url=TEST_URL, status_code=201)


#####################################
#     Tests for execute_request     #
#####################################


def _transport(requests: list[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"a": 1})

    return httpx.MockTransport(handler)


def test_execute_request_override_wins() -> None:
    requests: list[httpx.Request] = []
    config = RequestConfig(headers={"X-Source": "config"}, transport=_transport(requests))
    result = execute_request(
        "GET",
        TEST_URL,
        None,
        content_type=CONTENT_TYPE_JSON,
        decoder=decode_json,
        result_type=dict,
        config=config,
        headers={"X-Source": "call"},
    )
    assert requests[0].headers["x-source"] == "call"
    assert result.data == {"a": 1}
    assert result.request_headers == {"X-Source": "call", "Content-Type": CONTENT_TYPE_JSON}


@pytest.mark.asyncio
async def test_execute_request_async_overwrite_false() -> None:
    requests: list[httpx.Request] = []
    await execute_request_async(
        "POST",
        TEST_URL,
        b"",
        content_type=CONTENT_TYPE_JSON,
        decoder=decode_json,
        overwrite=False,
        headers={"content-type": "text/plain"},
        transport=_transport(requests),
    )
    assert requests[0].headers["content-type"] == "text/plain"


def test_execute_request_errors_report_the_same_url() -> None:
    """Test that decode and status errors both report the URL that was
    sent, with its query string in canonical form."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/missing":
            return httpx.Response(404)
        return httpx.Response(200, content=b'{"a": ')

    transport = httpx.MockTransport(handler)
    with pytest.raises(ResponseDecodeError) as decode_info:
        execute_request(
            "GET",
            "https://api.example.com/data?b=2&a=1",
            None,
            content_type=CONTENT_TYPE_JSON,
            decoder=decode_json,
            result_type=dict,
            transport=transport,
        )
    with pytest.raises(ResourceError) as status_info:
        execute_request(
            "GET",
            "https://api.example.com/missing?b=2&a=1",
            None,
            content_type=CONTENT_TYPE_JSON,
            decoder=decode_json,
            transport=transport,
        )
    assert decode_info.value.url == "https://api.example.com/data?a=1&b=2"
    assert status_info.value.url == "https://api.example.com/missing?a=1&b=2"
