"""Logging setup shared by the engine, the runner and the launcher."""

from __future__ import annotations

import json as _json
import logging
import sys
from typing import Any, Dict

_ROOT_LOGGER_NAME = "counter_air"
_PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(level: str | int = "INFO", json: bool = False) -> None:
    """
    Configure console logging once at startup.

    Args:
        level: Logging level name or number (e.g. "DEBUG")
        json: Emit JSON lines instead of plain text
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json else logging.Formatter(_PLAIN_FORMAT))

    root = logging.getLogger()
    # Replace handlers so repeated calls don't duplicate output
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger namespaced under the project.

    Modules call ``get_logger(__name__)``; names already inside a project
    package are used as-is.
    """
    if name == "__main__" or not name:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    return logging.getLogger(name)
