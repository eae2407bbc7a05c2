r"""httpwrap - Small helpers to send HTTP requests and decode responses.

This package wraps the httpx client with one-call helpers: build a
request (method, URL, headers, cookies, optional authorization token),
send it with a timeout and an optional custom transport, read the whole
response body and decode it as JSON or XML.

Key Features:
    - Generic-method JSON and XML helpers
    - Form-urlencoded POST helpers with JSON or XML responses
    - Multipart file upload helpers (POST and PUT)
    - Decoding into dataclasses or any callable target
    - Canonical re-encoding of query strings
    - Full async support with the same semantics
    - A single ResourceError describing failed calls

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from httpwrap import request_json
    >>> @dataclass
    ... class Status:
    ...     ok: bool
    ...
    >>> result = request_json(
    ...     "GET", "https://api.example.com/status", result_type=Status
    ... )  # doctest: +SKIP
    >>> result.status_code, result.data  # doctest: +SKIP
    (200, Status(ok=True))

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TIMEOUT",
    "FileItem",
    "HttpResult",
    "RequestConfig",
    "ResourceError",
    "ResponseDecodeError",
    "__version__",
    "post_file",
    "post_file_async",
    "post_form_json",
    "post_form_json_async",
    "post_form_xml",
    "post_form_xml_async",
    "put_file",
    "put_file_async",
    "request_json",
    "request_json_async",
    "request_xml",
    "request_xml_async",
    "send_request",
    "send_request_async",
]

from importlib.metadata import PackageNotFoundError, version

from httpwrap.core.config import DEFAULT_TIMEOUT, RequestConfig
from httpwrap.dispatch import send_request
from httpwrap.dispatch_async import send_request_async
from httpwrap.exceptions import ResourceError, ResponseDecodeError
from httpwrap.form import post_form_json, post_form_xml
from httpwrap.form_async import post_form_json_async, post_form_xml_async
from httpwrap.multipart import FileItem
from httpwrap.request import request_json, request_xml
from httpwrap.request_async import request_json_async, request_xml_async
from httpwrap.result import HttpResult
from httpwrap.upload import post_file, put_file
from httpwrap.upload_async import post_file_async, put_file_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
