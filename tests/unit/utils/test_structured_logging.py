from __future__ import annotations

import json
import logging
from io import StringIO
from typing import TYPE_CHECKING

import pytest

from httpwrap.utils import (
    StructuredFormatter,
    clear_correlation_id,
    correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def stream_logger() -> Generator[tuple[logging.Logger, StringIO], None, None]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("test_httpwrap_structured")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield logger, stream
    finally:
        logger.removeHandler(handler)
        clear_correlation_id()


##############################################
#     Tests for correlation ID management    #
##############################################


def test_get_correlation_id_initially_none() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("test-123")
    assert get_correlation_id() == "test-123"
    clear_correlation_id()
    assert get_correlation_id() is None


def test_correlation_id_context_manager_restores_previous() -> None:
    set_correlation_id("outer")
    with correlation_id("inner"):
        assert get_correlation_id() == "inner"
    assert get_correlation_id() == "outer"
    clear_correlation_id()


def test_correlation_id_context_manager_restores_on_error() -> None:
    clear_correlation_id()
    with pytest.raises(RuntimeError), correlation_id("failing"):
        raise RuntimeError("boom")
    assert get_correlation_id() is None


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_basic_fields(
    stream_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = stream_logger
    logger.info("Test message")
    log_data = json.loads(stream.getvalue())
    assert log_data["message"] == "Test message"
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test_httpwrap_structured"
    assert log_data["function"] == "test_structured_formatter_basic_fields"
    assert log_data["timestamp"].endswith("Z")
    assert "correlation_id" not in log_data


def test_structured_formatter_correlation_id(
    stream_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = stream_logger
    with correlation_id("req-42"):
        logger.debug("with id")
    assert json.loads(stream.getvalue())["correlation_id"] == "req-42"


def test_structured_formatter_exception(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    try:
        raise ValueError("bad value")
    except ValueError:
        logger.exception("failed")
    log_data = json.loads(stream.getvalue())
    assert "ValueError: bad value" in log_data["exception"]


def test_structured_formatter_non_serializable_extra(
    stream_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = stream_logger
    logger.info("content", extra={"payload": b"raw"})
    assert json.loads(stream.getvalue())["payload"] == "b'raw'"


####################################
#     Tests for log_structured     #
####################################


def test_log_structured_extra_fields(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    log_structured(
        logger, logging.INFO, "Request completed", url="https://api.example.com", status_code=200
    )
    log_data = json.loads(stream.getvalue())
    assert log_data["message"] == "Request completed"
    assert log_data["url"] == "https://api.example.com"
    assert log_data["status_code"] == 200


def test_log_structured_disabled_level(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    logger.setLevel(logging.WARNING)
    log_structured(logger, logging.DEBUG, "hidden", status_code=200)
    assert stream.getvalue() == ""
