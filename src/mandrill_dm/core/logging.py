"""Logging configuration helpers."""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any

from .config import LoggingSettings

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object with a fixed key order."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _formatter_config(structured: bool) -> dict[str, Any]:
    """Return the dictConfig formatter fragment for the chosen output."""
    if structured:
        return {"()": StructuredFormatter}
    return {"format": PLAIN_FORMAT}


def configure_logging(settings: LoggingSettings) -> None:
    """Configure application logging according to provided settings.

    Logs go to stderr so that ``mandrill-dm render`` keeps stdout for the
    rendered document.
    """
    dict_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": _formatter_config(settings.structured),
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": settings.level,
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": settings.level,
        },
    }

    logging.config.dictConfig(dict_config)


__all__ = ["PLAIN_FORMAT", "StructuredFormatter", "configure_logging"]
