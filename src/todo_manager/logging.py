"""Logging for todo-manager.

Thin structured layer over the standard library logger:

- get_logger() returns a StructuredLogger namespaced under ``todo_manager``
- keyword arguments passed to log calls become structured fields
- configure_logging() installs a JSON or human readable formatter

Example:
    >>> from todo_manager.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger("document.sorter")
    >>> logger.info("range_sorted", blocks=2, lines=14)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, Literal

ROOT_LOGGER_NAME = "todo_manager"

LogFormat = Literal["json", "human"]

# Attributes present on every LogRecord; anything else came in via ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


# =============================================================================
# Formatters
# =============================================================================


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data.update(_extra_fields(record))

        if record.levelno >= logging.ERROR:
            data["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


class HumanFormatter(logging.Formatter):
    """Readable single-line format: ``time LEVEL logger: message key=value``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"{timestamp} {record.levelname:<7} {record.name}: {record.getMessage()}"

        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# =============================================================================
# StructuredLogger
# =============================================================================


class StructuredLogger:
    """Logger that accepts structured fields as keyword arguments.

    Example:
        >>> logger = StructuredLogger("todo_manager.prioritizer")
        >>> logger.info("priority_assigned", line_number=4, priority=2)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, exc_info: Any = None, **fields: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, exc_info=exc_info, extra=fields, stacklevel=3)

    def debug(self, message: str, exc_info: Any = None, **fields: Any) -> None:
        self._log(logging.DEBUG, message, exc_info, **fields)

    def info(self, message: str, exc_info: Any = None, **fields: Any) -> None:
        self._log(logging.INFO, message, exc_info, **fields)

    def warning(self, message: str, exc_info: Any = None, **fields: Any) -> None:
        self._log(logging.WARNING, message, exc_info, **fields)

    def error(self, message: str, exc_info: Any = None, **fields: Any) -> None:
        self._log(logging.ERROR, message, exc_info, **fields)

    def child(self, suffix: str) -> StructuredLogger:
        """Create a logger nested under this one."""
        return StructuredLogger(f"{self.name}.{suffix}")


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger under the ``todo_manager`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return StructuredLogger(name)


def configure_logging(
    level: str | int = "INFO",
    format: LogFormat = "human",
    stream: Any = None,
) -> None:
    """Configure the package root logger.

    Args:
        level: Level name or number.
        format: "json" for machine readable output, "human" otherwise.
        stream: Output stream, stderr by default.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if format == "json" else HumanFormatter())
    root.addHandler(handler)
