r"""Shared dispatch logic for sync and async operations.

This module contains the request preparation and response validation
steps that are used by both the synchronous and the asynchronous
dispatcher.
"""

from __future__ import annotations

__all__ = [
    "AUTHORIZATION",
    "STATUS_CODE_ERROR_MESSAGE",
    "build_request",
    "check_status_code",
    "prepare_headers",
    "request_error",
    "read_error",
]

import logging
from typing import TYPE_CHECKING

import httpx

from httpwrap.exceptions import ResourceError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"

STATUS_CODE_ERROR_MESSAGE = "incorrect response status code"


def prepare_headers(headers: Mapping[str, str] | None, token: str | None) -> dict[str, str]:
    """Return the headers to copy onto the request.

    Args:
        headers: The caller-supplied headers, or ``None``.
        token: The optional authorization value. A non-empty token
            replaces any ``Authorization`` header and is sent verbatim.

    Returns:
        A new dictionary of headers.

    Example:
        ```pycon
        >>> from httpwrap.core.http_logic import prepare_headers
        >>> prepare_headers({"Accept": "text/xml"}, token="Bearer abc")
        {'Accept': 'text/xml', 'Authorization': 'Bearer abc'}

        ```
    """
    result = dict(headers) if headers is not None else {}
    if token:
        for key in [key for key in result if key.lower() == AUTHORIZATION.lower()]:
            del result[key]
        result[AUTHORIZATION] = token
    return result


def build_request(
    client: httpx.Client | httpx.AsyncClient,
    method: str,
    url: str,
    content: bytes,
    headers: dict[str, str],
) -> httpx.Request:
    """Build the request to dispatch.

    Args:
        client: The client the request is built with. Its cookies are
            attached to the request.
        method: The HTTP method name.
        url: The URL to send the request to.
        content: The raw request body.
        headers: The headers to copy onto the request.

    Returns:
        The request.

    Raises:
        ResourceError: If the request cannot be built (e.g. invalid URL
            or header value). The status code is 0.
    """
    try:
        return client.build_request(method, url, content=content, headers=headers)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        logger.debug(f"Cannot build {method} request to {url}: {exc}")
        raise ResourceError(
            url, message=f"cannot build {method} request to {url}", cause=exc
        ) from exc


def request_error(exc: Exception, url: str, method: str) -> ResourceError:
    """Create the error for a request that never completed.

    Args:
        exc: The transport error (DNS, refused connection, timeout...).
        url: The URL that was requested.
        method: The HTTP method name.

    Returns:
        A ResourceError with status code 0.
    """
    error_type = type(exc).__name__
    logger.debug(f"{method} request to {url} encountered {error_type}: {exc}")
    return ResourceError(url, message=f"{method} request to {url} failed: {exc}", cause=exc)


def read_error(exc: Exception, url: str, method: str, status_code: int) -> ResourceError:
    """Create the error for a response body that could not be read.

    Args:
        exc: The error raised while reading the body.
        url: The URL that was requested.
        method: The HTTP method name.
        status_code: The status code already received.

    Returns:
        A ResourceError carrying the status code.
    """
    logger.debug(f"Cannot read the response body of {method} request to {url}: {exc}")
    return ResourceError(
        url,
        status_code=status_code,
        message=f"cannot read the response body of {method} request to {url}",
        cause=exc,
    )


def check_status_code(response: httpx.Response, url: str, method: str, body: bytes) -> None:
    """Raise an error if the status code reports a failure.

    Any status code above 399 is a failure, whatever the response body
    contains.

    Args:
        response: The response, whose body has already been read.
        url: The URL that was requested.
        method: The HTTP method name.
        body: The raw request body. Its text is attached to the error.

    Raises:
        ResourceError: If the status code is greater than 399.
    """
    if response.status_code <= 399:
        return
    logger.debug(f"{method} request to {url} failed with status {response.status_code}")
    cause = httpx.HTTPStatusError(
        f"incorrect status code {response.status_code}",
        request=response.request,
        response=response,
    )
    raise ResourceError(
        url,
        status_code=response.status_code,
        message=STATUS_CODE_ERROR_MESSAGE,
        body=body.decode("utf-8", errors="replace"),
        content=response.content,
        cause=cause,
    ) from cause
