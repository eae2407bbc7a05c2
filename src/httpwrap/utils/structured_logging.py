r"""Structured logging utilities for machine-readable log output.

The library only emits records through ``logging.getLogger(__name__)``
loggers and never installs handlers. This module provides an opt-in JSON
formatter, a context-variable correlation ID and a helper to attach
structured fields to a record.

Example:
    Enable JSON logs for the request helpers:

    ```python
    import logging
    from httpwrap.utils.structured_logging import StructuredFormatter, correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("httpwrap")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    with correlation_id("order-42"):
        request_json("GET", "https://api.example.com/orders/42")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "httpwrap_correlation_id", default=None
)

# Attributes set by logging.LogRecord itself, everything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(value: str) -> None:
    """Set the correlation ID of the current context.

    The ID is stored in a context variable, so it is isolated between
    threads and asyncio tasks.

    Args:
        value: The correlation ID (e.g. request ID, trace ID).

    Example:
        ```pycon
        >>> from httpwrap.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("request-456")
        >>> get_correlation_id()
        'request-456'
        >>> clear_correlation_id()

        ```
    """
    _correlation_id.set(value)


def clear_correlation_id() -> None:
    """Clear the correlation ID of the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_id(value: str) -> Generator[None, None, None]:
    """Set a correlation ID for the duration of a ``with`` block.

    The previous value is restored on exit.

    Args:
        value: The correlation ID.

    Example:
        ```pycon
        >>> from httpwrap.utils.structured_logging import correlation_id, get_correlation_id
        >>> with correlation_id("batch-7"):
        ...     get_correlation_id()
        ...
        'batch-7'
        >>> get_correlation_id()

        ```
    """
    token = _correlation_id.set(value)
    try:
        yield
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``, ``message``,
    ``module``, ``function`` and ``line``, plus ``correlation_id`` when
    one is set, ``exception`` when the record carries exception info,
    and every field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from httpwrap.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.warning("GET failed", extra={"status_code": 503})
        >>> json.loads(stream.getvalue())["status_code"]
        503

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        current_id = get_correlation_id()
        if current_id is not None:
            log_data["correlation_id"] = current_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        # Always ISO 8601 with millisecond precision, datefmt is ignored
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    The fields are attached to the record through ``extra``, so they
    appear as top-level keys when ``StructuredFormatter`` is used.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.DEBUG``).
        message: Log message.
        **extra: Structured fields to attach to the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
