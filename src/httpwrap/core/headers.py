r"""Header handling for the request helpers."""

from __future__ import annotations

__all__ = ["CONTENT_TYPE", "effective_headers"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

CONTENT_TYPE = "Content-Type"


def effective_headers(
    headers: Mapping[str, str] | None,
    content_type: str,
    *,
    overwrite: bool = True,
) -> dict[str, str]:
    """Compute the headers to send with a request.

    The caller's mapping is never mutated, a new dictionary is returned.

    Args:
        headers: The caller-supplied headers, or ``None``.
        content_type: The content type implied by the call variant.
        overwrite: If ``True``, the content type replaces any value the
            caller set. If ``False``, it is only added when the caller
            did not set a content type (any key case).

    Returns:
        ``{"Content-Type": content_type}`` if ``headers`` is ``None``,
        otherwise a copy of ``headers`` with the content type applied.

    Example:
        ```pycon
        >>> from httpwrap.core.headers import effective_headers
        >>> effective_headers(None, "application/json")
        {'Content-Type': 'application/json'}
        >>> effective_headers({"content-type": "text/plain"}, "text/xml", overwrite=False)
        {'content-type': 'text/plain'}

        ```
    """
    if headers is None:
        return {CONTENT_TYPE: content_type}

    result = dict(headers)
    existing = [key for key in result if key.lower() == CONTENT_TYPE.lower()]
    if existing and not overwrite:
        return result
    for key in existing:
        del result[key]
    result[CONTENT_TYPE] = content_type
    return result
