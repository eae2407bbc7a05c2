r"""Configuration dataclass and defaults for the request helpers.

This module provides the default values and a dataclass-based
configuration object that enumerates every optional parameter accepted
by the request helpers.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPE_FORM",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_MULTIPART",
    "CONTENT_TYPE_XML",
    "DEFAULT_TIMEOUT",
    "RequestConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from httpwrap.core.validation import resolve_timeout

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


# Default timeout in seconds, used when no positive timeout is given
DEFAULT_TIMEOUT = 30.0

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_XML = "text/xml"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"


@dataclass(frozen=True)
class RequestConfig:
    """Optional parameters shared by all the request helpers.

    Args:
        headers: Optional mapping of extra request headers. The mapping
            is never mutated; the helpers work on a copy.
        cookies: Optional cookies to attach to the request.
        token: Optional value of the ``Authorization`` header. It is
            sent verbatim, so the caller supplies any scheme prefix
            (e.g. ``"Bearer ..."``).
        transport: Optional httpx transport used instead of the default
            one (TLS customization, proxying, connection reuse). The
            helpers never close a transport they did not create.
        timeout: Optional timeout in seconds or ``httpx.Timeout``.
            Missing and non-positive values fall back to
            ``DEFAULT_TIMEOUT``.

    Example:
        ```pycon
        >>> from httpwrap import RequestConfig
        >>> config = RequestConfig(token="Bearer abc")
        >>> config.effective_timeout
        30.0
        >>> config.merge(timeout=5).effective_timeout
        5
        >>> config.timeout is None  # Original unchanged
        True

        ```
    """

    headers: Mapping[str, str] | None = None
    cookies: httpx.Cookies | Mapping[str, str] | None = None
    token: str | None = None
    transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None
    timeout: float | httpx.Timeout | None = None

    @property
    def effective_timeout(self) -> float | httpx.Timeout:
        """The timeout actually applied to the HTTP client."""
        return resolve_timeout(self.timeout, default=DEFAULT_TIMEOUT)

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RequestConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to keyword arguments for the
        dispatcher.

        Returns:
            Dictionary with the dispatcher parameters.
        """
        return {
            "headers": self.headers,
            "cookies": self.cookies,
            "token": self.token,
            "transport": self.transport,
            "timeout": self.effective_timeout,
        }
