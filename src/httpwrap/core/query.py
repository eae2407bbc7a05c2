r"""Query-string normalization for outbound URLs."""

from __future__ import annotations

__all__ = ["canonicalize_url"]

import logging

import httpx

from httpwrap.exceptions import ResourceError

logger: logging.Logger = logging.getLogger(__name__)


def canonicalize_url(url: str) -> str:
    """Re-encode the query string of a URL in canonical form.

    The query parameters are sorted by key (the relative order of
    repeated keys is preserved), blank values are kept, and every value
    is form-encoded consistently. URLs without a ``?`` are returned
    unchanged.

    Args:
        url: The URL to normalize.

    Returns:
        The URL with its query string re-encoded.

    Raises:
        ResourceError: If the URL cannot be parsed.

    Example:
        ```pycon
        >>> from httpwrap.core.query import canonicalize_url
        >>> canonicalize_url("https://api.example.com/search?q=a b&lang=en")
        'https://api.example.com/search?lang=en&q=a+b'
        >>> canonicalize_url("https://api.example.com/data")
        'https://api.example.com/data'

        ```
    """
    if "?" not in url:
        return url

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ResourceError(url, message=f"cannot parse URL {url!r}", cause=exc) from exc

    items = sorted(parsed.params.multi_items(), key=lambda item: item[0])
    canonical = str(parsed.copy_with(params=httpx.QueryParams(items)))
    if canonical != url:
        logger.debug(f"Re-encoded query string of {url} as {canonical}")
    return canonical
