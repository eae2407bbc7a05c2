r"""Contain the exceptions raised by the request helpers."""

from __future__ import annotations

__all__ = ["ResourceError", "ResponseDecodeError"]

from typing import Any


class ResourceError(Exception):
    """Raised when an outbound HTTP call fails.

    A resource error is raised when the request cannot be built, when the
    network round trip fails, when the response body cannot be read, or
    when the server answers with a status code >= 400.

    Args:
        url: The URL that was requested.
        status_code: The HTTP status code, or 0 if no response was
            received.
        message: A human-readable description of the failure.
        body: An optional payload attached to the error. For error
            status codes this is the text of the outgoing request body,
            not the response.
        content: The raw response body, if one was read.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from httpwrap import ResourceError
        >>> error = ResourceError(
        ...     url="https://api.example.com/data",
        ...     status_code=404,
        ...     message="incorrect response status code",
        ...     body="",
        ... )
        >>> error.status_code
        404

        ```
    """

    def __init__(
        self,
        url: str,
        *,
        status_code: int = 0,
        message: str = "",
        body: Any = None,
        content: bytes | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.message = message
        self.body = body
        self.content = content
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Resource error: URL: {self.url}, status code: {self.status_code}, "
            f"message: {self.message}, err: {self.cause}, body: {self.body}"
        )


class ResponseDecodeError(ValueError):
    """Raised when a successful response body cannot be decoded.

    The request itself succeeded, so ``status_code`` holds the status
    reported by the server. The codec error is available as ``cause``
    and is chained as ``__cause__``.

    Args:
        url: The URL that was requested.
        status_code: The HTTP status code of the response.
        content: The raw response body that failed to decode.
        cause: The codec error.
    """

    def __init__(
        self,
        url: str,
        *,
        status_code: int,
        content: bytes,
        cause: BaseException | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.content = content
        self.cause = cause
        super().__init__(
            f"cannot decode response from {url} (status code: {status_code}): {cause}"
        )
