r"""Core shared logic for sync and async HTTP operations.

This package contains the configuration, header and query handling,
and the request/response steps shared by the synchronous and
asynchronous helpers.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPE_FORM",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_MULTIPART",
    "CONTENT_TYPE_XML",
    "DEFAULT_TIMEOUT",
    "RequestConfig",
    "canonicalize_url",
    "effective_headers",
    "execute_request",
    "execute_request_async",
    "normalize_method",
    "resolve_timeout",
]

from httpwrap.core.config import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    CONTENT_TYPE_XML,
    DEFAULT_TIMEOUT,
    RequestConfig,
)
from httpwrap.core.execute import execute_request, execute_request_async
from httpwrap.core.headers import effective_headers
from httpwrap.core.query import canonicalize_url
from httpwrap.core.validation import normalize_method, resolve_timeout
