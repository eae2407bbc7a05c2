r"""Contain the asynchronous generic-method JSON and XML helpers."""

from __future__ import annotations

__all__ = ["request_json_async", "request_xml_async"]

from typing import TYPE_CHECKING, Any

from httpwrap.core.config import CONTENT_TYPE_JSON, CONTENT_TYPE_XML
from httpwrap.core.execute import execute_request_async
from httpwrap.core.validation import normalize_method
from httpwrap.serialization import decode_json, decode_xml

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from httpwrap.core.config import RequestConfig
    from httpwrap.result import HttpResult


async def request_json_async(
    method: str,
    url: str,
    body: bytes | str | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Asynchronously send an HTTP request with a JSON body and decode the JSON
    response.

    The ``Content-Type`` header is always ``application/json``, even if
    the caller set another value.

    Args:
        method: The HTTP method name. It is stripped and upper-cased.
        url: The URL to send the request to.
        body: The raw JSON request body.
        result_type: Optional decode target: a dataclass type or any
            callable accepting the decoded JSON value. The response is
            decoded only if this is given and the body is not empty.
        config: An optional RequestConfig with the default options.
        headers: Extra request headers. Overrides ``config.headers``.
        cookies: Cookies to attach. Overrides ``config.cookies``.
        token: Value of the ``Authorization`` header, sent verbatim
            (e.g. ``"Bearer abc"``). Overrides ``config.token``.
        transport: Custom httpx transport. Overrides
            ``config.transport``.
        timeout: Timeout in seconds. Overrides ``config.timeout``.
            Non-positive values fall back to 30 seconds.

    Returns:
        The status code, raw body and decoded data of the response.

    Raises:
        ResourceError: If the request fails or the status code is
            greater than 399.
        ResponseDecodeError: If the response body is not valid JSON.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpwrap import request_json_async
        >>> result = asyncio.run(
        ...     request_json_async(
        ...         "post", "https://api.example.com/items", b'{"name": "pen"}', result_type=dict
        ...     )
        ... )  # doctest: +SKIP
        >>> result.data  # doctest: +SKIP
        {'id': 1, 'name': 'pen'}

        ```
    """
    return await execute_request_async(
        normalize_method(method),
        url,
        body,
        content_type=CONTENT_TYPE_JSON,
        decoder=decode_json,
        result_type=result_type,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )


async def request_xml_async(
    method: str,
    url: str,
    body: bytes | str | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Asynchronously send an HTTP request with an XML body and decode the XML
    response.

    The ``Content-Type`` header is always ``text/xml``, even if the
    caller set another value. See ``request_json_async`` for the arguments;
    a non-dataclass ``result_type`` receives the parsed root element.

    Returns:
        The status code, raw body and decoded data of the response.

    Raises:
        ResourceError: If the request fails or the status code is
            greater than 399.
        ResponseDecodeError: If the response body is not well-formed
            XML.
    """
    return await execute_request_async(
        normalize_method(method),
        url,
        body,
        content_type=CONTENT_TYPE_XML,
        decoder=decode_xml,
        result_type=result_type,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )
