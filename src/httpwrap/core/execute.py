r"""Shared entry-point logic for sync and async operations.

Every public helper fixes a method and a content type, then delegates
to the functions of this module, which merge the configuration, apply
the content-type default, call the dispatcher and decode the response.
"""

from __future__ import annotations

__all__ = ["decode_result", "execute_request", "execute_request_async"]

import logging
from typing import TYPE_CHECKING, Any

from httpwrap.core.config import RequestConfig
from httpwrap.core.headers import effective_headers
from httpwrap.dispatch import send_request
from httpwrap.dispatch_async import send_request_async

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpwrap.result import HttpResult

logger: logging.Logger = logging.getLogger(__name__)


def _effective_config(
    config: RequestConfig | None,
    content_type: str,
    overwrite: bool,
    overrides: dict[str, Any],
) -> RequestConfig:
    merged = (config if config is not None else RequestConfig()).merge(**overrides)
    headers = effective_headers(merged.headers, content_type, overwrite=overwrite)
    return merged.merge(headers=headers)


def decode_result(
    result: HttpResult,
    decoder: Callable[..., Any],
    result_type: Callable[..., Any] | None,
) -> HttpResult:
    """Decode the body of a successful response.

    Decoding is skipped when no target is given or the body is empty.

    Args:
        result: The result returned by the dispatcher.
        decoder: The decode function (``decode_json`` or
            ``decode_xml``).
        result_type: The decode target, or ``None``.

    Returns:
        The result, with ``data`` set if the body was decoded.

    Raises:
        ResponseDecodeError: If the body cannot be decoded.
    """
    if result_type is None or not result.content:
        return result
    data = decoder(
        result.content, result_type, url=result.url, status_code=result.status_code
    )
    return result.with_data(data)


def execute_request(
    method: str,
    url: str,
    body: Any,
    *,
    content_type: str,
    decoder: Callable[..., Any],
    result_type: Callable[..., Any] | None = None,
    overwrite: bool = True,
    config: RequestConfig | None = None,
    **overrides: Any,
) -> HttpResult:
    """Send a request and decode its response (synchronous).

    Args:
        method: The HTTP method name.
        url: The URL to send the request to.
        body: The request body.
        content_type: The content type implied by the call variant.
        decoder: The decode function applied to the response body.
        result_type: The decode target, or ``None`` to skip decoding.
        overwrite: Whether the content type replaces a caller value.
        config: The base configuration. Defaults to ``RequestConfig()``.
        **overrides: Per-call configuration values. Values that are not
            ``None`` override the ones of ``config``.

    Returns:
        The result of the call.

    Raises:
        ResourceError: If the call fails.
        ResponseDecodeError: If the response body cannot be decoded.
    """
    effective_config = _effective_config(config, content_type, overwrite, overrides)
    result = send_request(method, url, body, **effective_config.to_dict())
    return decode_result(result, decoder, result_type)


async def execute_request_async(
    method: str,
    url: str,
    body: Any,
    *,
    content_type: str,
    decoder: Callable[..., Any],
    result_type: Callable[..., Any] | None = None,
    overwrite: bool = True,
    config: RequestConfig | None = None,
    **overrides: Any,
) -> HttpResult:
    """Send a request and decode its response (asynchronous).

    See ``execute_request`` for the arguments.
    """
    effective_config = _effective_config(config, content_type, overwrite, overrides)
    result = await send_request_async(method, url, body, **effective_config.to_dict())
    return decode_result(result, decoder, result_type)
