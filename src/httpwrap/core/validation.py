r"""Parameter normalization utilities for the request helpers."""

from __future__ import annotations

__all__ = ["normalize_method", "resolve_timeout"]

import httpx


def normalize_method(method: str) -> str:
    """Normalize an HTTP method name.

    Args:
        method: The HTTP method name, in any case and possibly padded
            with whitespace.

    Returns:
        The stripped, upper-case method name. An empty name means
        ``"GET"``.

    Example:
        ```pycon
        >>> from httpwrap.core.validation import normalize_method
        >>> normalize_method(" post ")
        'POST'
        >>> normalize_method("")
        'GET'

        ```
    """
    return method.strip().upper() or "GET"


def resolve_timeout(
    timeout: float | httpx.Timeout | None, default: float
) -> float | httpx.Timeout:
    """Return the timeout to apply to the HTTP client.

    Args:
        timeout: The requested timeout in seconds, or an
            ``httpx.Timeout`` instance which is used as is.
        default: The timeout used when ``timeout`` is missing or not
            positive.

    Returns:
        ``timeout`` if it is an ``httpx.Timeout`` or a positive number,
        otherwise ``default``.

    Example:
        ```pycon
        >>> from httpwrap.core.validation import resolve_timeout
        >>> resolve_timeout(5, default=30.0)
        5
        >>> resolve_timeout(0, default=30.0)
        30.0
        >>> resolve_timeout(None, default=30.0)
        30.0

        ```
    """
    if isinstance(timeout, httpx.Timeout):
        return timeout
    if timeout is not None and timeout > 0:
        return timeout
    return default
