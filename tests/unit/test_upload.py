r"""Unit tests for post_file and put_file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from httpwrap import FileItem, ResourceError, ResponseDecodeError, post_file, put_file, upload

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.conftest import RecordingHandler

TEST_URL = "https://api.example.com/upload"
FILE_ITEM = FileItem(key="document", file_name="notes.txt", content=b"hello world")


def _boundary(request: httpx.Request) -> str:
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data; boundary=")
    return content_type.split("boundary=", 1)[1]


###############################
#     Tests for post_file     #
###############################


def test_post_file_request(handler: RecordingHandler, transport: httpx.MockTransport) -> None:
    post_file(TEST_URL, FILE_ITEM, {"folder": "inbox"}, transport=transport)
    request = handler.last_request
    boundary = _boundary(request)
    assert request.method == "POST"
    assert request.content.startswith(f"--{boundary}\r\n".encode())
    assert request.content.endswith(f"--{boundary}--\r\n".encode())
    assert request.content.index(b'name="folder"') < request.content.index(
        b'name="document"; filename="notes.txt"'
    )
    assert b"hello world" in request.content


def test_post_file_overwrites_content_type(
    handler: RecordingHandler, transport: httpx.MockTransport
) -> None:
    post_file(TEST_URL, FILE_ITEM, headers={"Content-Type": "text/plain"}, transport=transport)
    _boundary(handler.last_request)


def test_post_file_token(handler: RecordingHandler, transport: httpx.MockTransport) -> None:
    post_file(TEST_URL, FILE_ITEM, token="Bearer abc", transport=transport)
    assert handler.last_request.headers["authorization"] == "Bearer abc"


def test_post_file_decodes_response(transport: httpx.MockTransport) -> None:
    result = post_file(TEST_URL, FILE_ITEM, result_type=dict, transport=transport)
    assert result.data == {"ok": True}


def test_post_file_malformed_response(make_handler: Callable[..., RecordingHandler]) -> None:
    handler = make_handler(content=b"uploaded")
    with pytest.raises(ResponseDecodeError):
        post_file(TEST_URL, FILE_ITEM, result_type=dict, transport=httpx.MockTransport(handler))


def test_post_file_error_status_echoes_multipart_body(
    make_handler: Callable[..., RecordingHandler],
) -> None:
    handler = make_handler(status_code=413)
    with pytest.raises(ResourceError) as exc_info:
        post_file(TEST_URL, FILE_ITEM, transport=httpx.MockTransport(handler))
    error = exc_info.value
    assert error.status_code == 413
    assert error.body == handler.last_request.content.decode()


##############################
#     Tests for put_file     #
##############################


def test_put_file_request(handler: RecordingHandler, transport: httpx.MockTransport) -> None:
    result = put_file(TEST_URL, FILE_ITEM, result_type=dict, transport=transport)
    assert handler.last_request.method == "PUT"
    _boundary(handler.last_request)
    assert b'filename="notes.txt"' in handler.last_request.content
    assert result.data == {"ok": True}


def test_upload_module_exports_only_public_helpers() -> None:
    assert upload.__all__ == ["post_file", "put_file"]
    assert not hasattr(upload, "upload_file")
