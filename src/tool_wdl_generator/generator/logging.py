"""Structured logging configuration.

Log lines are JSON objects written to stderr; stdout carries generated output.
The work unit and argument being processed are promoted to top-level keys so a
run over many tools can be filtered per tool.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from tool_wdl_generator.generator.errors import WDLGenerationError

# attributes every LogRecord carries; anything else came in through ``extra``
_STANDARD_RECORD_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

CONTEXT_FIELDS: tuple[str, ...] = ("work_unit", "argument")


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON line with generation context at the top level."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        }
        for field in CONTEXT_FIELDS:
            if field in extra:
                payload[field] = extra.pop(field)
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
            error = record.exc_info[1]
            if isinstance(error, WDLGenerationError):
                payload["error"] = {
                    "type": type(error).__name__,
                    "work_unit": error.work_unit,
                    "argument": error.argument,
                }

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, stream: TextIO | None = None) -> None:
    """Install a single JSON handler on the root logger.

    Existing root handlers are removed so configuring twice does not duplicate
    lines. ``stream`` defaults to stderr.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())
