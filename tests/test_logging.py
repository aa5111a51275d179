"""Tests for logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from mandrill_dm.core.config import LoggingSettings
from mandrill_dm.core.logging import (
    PLAIN_FORMAT,
    StructuredFormatter,
    configure_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way the test found it."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _console_formatter() -> logging.Formatter | None:
    return logging.getLogger().handlers[0].formatter


def test_plain_logging_uses_plain_format_at_requested_level() -> None:
    configure_logging(LoggingSettings(level="DEBUG", structured=False))

    formatter = _console_formatter()
    assert logging.getLogger().level == logging.DEBUG
    assert not isinstance(formatter, StructuredFormatter)
    assert formatter is not None and formatter._fmt == PLAIN_FORMAT


def test_structured_logging_emits_ordered_json() -> None:
    configure_logging(LoggingSettings(level="WARNING", structured=True))

    formatter = _console_formatter()
    assert isinstance(formatter, StructuredFormatter)
    record = logging.LogRecord(
        name="mandrill_dm.adapter.metadata",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Metadata header uses deprecated %s syntax",
        args=("'=>'",),
        exc_info=None,
    )

    entry = json.loads(formatter.format(record))

    assert list(entry) == ["time", "level", "logger", "message"]
    assert entry["level"] == "WARNING"
    assert entry["logger"] == "mandrill_dm.adapter.metadata"
    assert entry["message"] == "Metadata header uses deprecated '=>' syntax"


def test_structured_logging_includes_exception_text() -> None:
    formatter = StructuredFormatter()
    try:
        raise ValueError("bad address")
    except ValueError:
        record = logging.getLogger("mandrill_dm").makeRecord(
            "mandrill_dm", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    entry = json.loads(formatter.format(record))

    assert "ValueError: bad address" in entry["exception"]
