# =============================================================================
# app/logging_config.py - Structured Logging Setup
# =============================================================================
# Configures the root logger once at process start.
#
# Modules log with the standard library and attach context through `extra`:
#   logger.info("Request received", extra={"method": "GET", "path": "/"})
#
# Two output formats:
# - console: "2024-01-15T10:30:00+0000 INF Request received method=GET path=/"
# - json:    {"time": "...", "level": "info", "message": "...", "method": "GET"}
# =============================================================================

import json
import logging
import sys
from typing import Any

# Attributes every LogRecord has; anything else was passed through `extra`.
_RESERVED_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName", "color_message"}

_LEVEL_ABBREVIATIONS = {
    "DEBUG": "DBG",
    "INFO": "INF",
    "WARNING": "WRN",
    "ERROR": "ERR",
    "CRITICAL": "FTL",
}

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields attached to a log record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class ConsoleFormatter(logging.Formatter):
    """Human-readable single line: time, level, message, key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_ABBREVIATIONS.get(record.levelname, record.levelname[:3])
        parts = [self.formatTime(record, TIME_FORMAT), level, record.getMessage()]
        parts.extend(f"{key}={value}" for key, value in extra_fields(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per line, structured fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "time": self.formatTime(record, TIME_FORMAT),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        base.update(extra_fields(record))
        if record.exc_info:
            base["error"] = self.formatException(record.exc_info)
        return json.dumps(base, default=str, separators=(",", ":"))


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """
    Install a stdout handler on the root logger.

    Replaces any existing root handlers so repeated calls don't duplicate
    output. uvicorn's own loggers propagate to the root and share the format.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if fmt == "json" else ConsoleFormatter())

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
