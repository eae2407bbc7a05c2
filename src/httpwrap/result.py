r"""Contain the result object returned by the request helpers."""

from __future__ import annotations

__all__ = ["HttpResult"]

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class HttpResult:
    """The outcome of a successful HTTP call.

    Args:
        status_code: The HTTP status code reported by the server.
        content: The raw response body.
        headers: The response headers.
        request_headers: The headers that were actually sent, after the
            content type and authorization defaults were applied.
        url: The URL that was actually requested, with its query
            string in canonical form.
        data: The decoded response body, or ``None`` if no decoding was
            requested or the body was empty.
    """

    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    request_headers: dict[str, str] = field(default_factory=dict)
    url: str = ""
    data: Any = None

    @property
    def text(self) -> str:
        """The response body decoded as UTF-8."""
        return self.content.decode("utf-8", errors="replace")

    def with_data(self, data: Any) -> HttpResult:
        return replace(self, data=data)
