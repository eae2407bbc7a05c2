r"""Contain the asynchronous multipart file upload helpers."""

from __future__ import annotations

__all__ = ["post_file_async", "put_file_async"]

from typing import TYPE_CHECKING, Any

from httpwrap.core.execute import execute_request_async
from httpwrap.multipart import encode_multipart
from httpwrap.serialization import decode_json

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from httpwrap.core.config import RequestConfig
    from httpwrap.multipart import FileItem
    from httpwrap.result import HttpResult


async def _upload_file_async(
    method: str,
    url: str,
    file_item: FileItem,
    fields: Mapping[str, str] | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    **overrides: Any,
) -> HttpResult:
    """Upload a file in a multipart/form-data body and decode the JSON
    response.

    Shared implementation of ``post_file_async`` and ``put_file_async``.
    """
    body, content_type = encode_multipart(fields, file_item)
    return await execute_request_async(
        method,
        url,
        body,
        content_type=content_type,
        decoder=decode_json,
        result_type=result_type,
        config=config,
        **overrides,
    )


async def post_file_async(
    url: str,
    file_item: FileItem,
    fields: Mapping[str, str] | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Asynchronously upload a file with an HTTP POST multipart request and decode the
    JSON response.

    The text fields are written before the file. The ``Content-Type``
    header is always ``multipart/form-data`` with the generated
    boundary, even if the caller set another value.

    Args:
        url: The URL to send the request to.
        file_item: The file to upload (field name, file name, content).
        fields: Optional text fields sent along with the file.
        result_type: Optional decode target for the JSON response.
        config: An optional RequestConfig with the default options.
        headers: Extra request headers. Overrides ``config.headers``.
        cookies: Cookies to attach. Overrides ``config.cookies``.
        token: Value of the ``Authorization`` header, sent verbatim.
        transport: Custom httpx transport.
        timeout: Timeout in seconds. Non-positive values fall back to
            30 seconds.

    Returns:
        The status code, raw body and decoded data of the response.

    Raises:
        ResourceError: If the request fails or the status code is
            greater than 399.
        ResponseDecodeError: If the response body is not valid JSON.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpwrap import FileItem, post_file_async
        >>> result = asyncio.run(
        ...     post_file_async(
        ...         "https://api.example.com/upload",
        ...         FileItem(key="file", file_name="report.csv", content=b"a,b\n1,2\n"),
        ...         fields={"folder": "reports"},
        ...         token="Bearer abc",
        ...     )
        ... )  # doctest: +SKIP

        ```
    """
    return await _upload_file_async(
        "POST",
        url,
        file_item,
        fields,
        result_type=result_type,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )


async def put_file_async(
    url: str,
    file_item: FileItem,
    fields: Mapping[str, str] | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Asynchronously upload a file with an HTTP PUT multipart request and decode the
    JSON response.

    Same as ``post_file_async`` with the PUT method.
    """
    return await _upload_file_async(
        "PUT",
        url,
        file_item,
        fields,
        result_type=result_type,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )
