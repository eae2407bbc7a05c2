r"""Contain the asynchronous request dispatcher shared by all the
asynchronous helpers."""

from __future__ import annotations

__all__ = ["send_request_async"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from httpwrap.core.config import DEFAULT_TIMEOUT
from httpwrap.core.http_logic import (
    build_request,
    check_status_code,
    prepare_headers,
    read_error,
    request_error,
)
from httpwrap.core.query import canonicalize_url
from httpwrap.core.validation import normalize_method, resolve_timeout
from httpwrap.result import HttpResult
from httpwrap.serialization import to_bytes
from httpwrap.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)


async def send_request_async(
    method: str,
    url: str,
    body: bytes | str | Mapping[str, Any] | None = None,
    *,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
) -> HttpResult:
    """Build an HTTP request, send it and read the whole response.

    A new client is created for each call. If ``transport`` is given,
    it is used by the client and left open for the caller to reuse;
    otherwise the client and its transport are closed before returning.
    Redirects are followed, so the result describes the final response.

    Args:
        method: The HTTP method name (e.g. ``"GET"``).
        url: The URL to send the request to. If it contains a query
            string, the query is re-encoded in canonical form first.
        body: The request body.
        headers: The headers to copy onto the request. The mapping is
            not mutated.
        cookies: Optional cookies to attach to the request.
        token: Optional value of the ``Authorization`` header, sent
            verbatim.
        transport: Optional httpx transport.
        timeout: Timeout in seconds or ``httpx.Timeout``. Missing and
            non-positive values fall back to ``DEFAULT_TIMEOUT``.

    Returns:
        The status code, body and headers of the response. ``data`` is
        always ``None``.

    Raises:
        ResourceError: If the request cannot be built, the network call
            fails, the response body cannot be read, or the status code
            is greater than 399.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpwrap import send_request_async
        >>> result = asyncio.run(
        ...     send_request_async("GET", "https://api.example.com/data")
        ... )  # doctest: +SKIP
        >>> result.status_code  # doctest: +SKIP
        200

        ```
    """
    method = normalize_method(method)
    timeout = resolve_timeout(timeout, default=DEFAULT_TIMEOUT)
    content = to_bytes(body)
    url = canonicalize_url(url)
    request_headers = prepare_headers(headers, token)

    client = httpx.AsyncClient(
        timeout=timeout, cookies=cookies, transport=transport, follow_redirects=True
    )
    try:
        request = build_request(client, method, url, content, request_headers)
        logger.debug(f"Sending {method} request to {url} (timeout={timeout})")
        try:
            response = await client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise request_error(exc, url, method) from exc

        try:
            await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise read_error(exc, url, method, response.status_code) from exc
        finally:
            await response.aclose()
    finally:
        # A caller-supplied transport is left open for reuse
        if transport is None:
            await client.aclose()

    log_structured(
        logger,
        logging.DEBUG,
        f"{method} request to {url} completed with status {response.status_code}",
        url=url,
        method=method,
        status_code=response.status_code,
    )
    check_status_code(response, url, method, content)
    return HttpResult(
        status_code=response.status_code,
        content=response.content,
        headers=dict(response.headers),
        request_headers=request_headers,
        url=url,
    )
