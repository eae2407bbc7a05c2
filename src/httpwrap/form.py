r"""Contain the synchronous form-urlencoded POST helpers."""

from __future__ import annotations

__all__ = ["post_form_json", "post_form_xml"]

from typing import TYPE_CHECKING, Any

from httpwrap.core.config import CONTENT_TYPE_FORM
from httpwrap.core.execute import execute_request
from httpwrap.serialization import decode_json, decode_xml

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from httpwrap.core.config import RequestConfig
    from httpwrap.result import HttpResult


def post_form_json(
    url: str,
    body: bytes | str | Mapping[str, Any] | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.BaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Send a form-urlencoded HTTP POST request and decode the JSON
    response.

    The ``Content-Type`` header is always
    ``application/x-www-form-urlencoded``, even if the caller set
    another value.

    Args:
        url: The URL to send the request to.
        body: The form body, either already encoded (bytes or string)
            or a mapping of fields which is form-encoded.
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
        >>> from httpwrap import post_form_json
        >>> result = post_form_json(
        ...     "https://api.example.com/login", {"user": "ana", "password": "secret"}
        ... )  # doctest: +SKIP

        ```
    """
    return execute_request(
        "POST",
        url,
        body,
        content_type=CONTENT_TYPE_FORM,
        decoder=decode_json,
        result_type=result_type,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )


def post_form_xml(
    url: str,
    body: bytes | str | Mapping[str, Any] | None = None,
    *,
    result_type: Callable[..., Any] | None = None,
    config: RequestConfig | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: httpx.Cookies | Mapping[str, str] | None = None,
    token: str | None = None,
    transport: httpx.BaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> HttpResult:
    r"""Send a form-urlencoded HTTP POST request and decode the XML
    response.

    Unlike every other helper, a ``Content-Type`` set by the caller is
    kept; ``application/x-www-form-urlencoded`` is only used when no
    content type was given. See ``post_form_json`` for the arguments.

    Returns:
        The status code, raw body and decoded data of the response.

    Raises:
        ResourceError: If the request fails or the status code is
            greater than 399.
        ResponseDecodeError: If the response body is not well-formed
            XML.
    """
    return execute_request(
        "POST",
        url,
        body,
        content_type=CONTENT_TYPE_FORM,
        decoder=decode_xml,
        result_type=result_type,
        overwrite=False,
        config=config,
        headers=headers,
        cookies=cookies,
        token=token,
        transport=transport,
        timeout=timeout,
    )
