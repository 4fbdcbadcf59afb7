"""Logging configuration for the link-tree server and the crawl runner.

One JSON object per line on stdout, so CI logs can be grepped or parsed.
setup_logging() is idempotent: calling it again won't duplicate handlers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else on a record came from `extra=`.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message"}

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class JsonFormatter(logging.Formatter):
    """Format records as JSON lines.

    - Always emits ts, level, logger and message (or the dict passed as msg).
    - Copies structured fields given via `logger.info("msg", extra={...})`.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict):
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in payload:
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_stream_handler() -> Handler:
    # No handler level: the root logger's level is the single filter.
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter())
    return handler


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Attach the JSON handler to the root logger and route uvicorn through it.

    A second call only adjusts the level.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if root.handlers:  # already configured (reload, tests, second call)
        root.setLevel(level)
        return

    root.setLevel(level)
    root.addHandler(_make_stream_handler())

    for name in _SERVER_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.propagate = True
        for h in list(lg.handlers):
            lg.removeHandler(h)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, e.g. get_logger("api")."""
    return logging.getLogger(name if name else __name__)
