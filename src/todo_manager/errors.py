"""Error hierarchy for todo-manager.

All errors raised by the package derive from TodoManagerError so callers can
catch a single type at the boundary (the CLI, or an editor integration) and
report it to the user.

Hierarchy:
    TodoManagerError
    ├── ConfigurationError
    └── DocumentError
        ├── NotAHeadingError
        ├── NoCategoriesError
        └── SelectionError
            ├── EmptySelectionError
            └── InvalidRangeError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from todo_manager.document.models import Selection


class TodoManagerError(Exception):
    """Base exception for todo-manager errors.

    Attributes:
        message: Human readable error message.
        details: Structured context for logging.
        hint: Optional suggestion shown to the user.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n  Hint: {self.hint}"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ConfigurationError(TodoManagerError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ):
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details, hint)
        self.field = field


class DocumentError(TodoManagerError):
    """Base class for errors about the document being edited."""

    pass


class NotAHeadingError(DocumentError):
    """A heading-only accessor was called on a line that is not a heading."""

    def __init__(self, line: str):
        super().__init__(
            f"Not a category heading: {line!r}",
            details={"line": line},
            hint="Check is_category_heading() before asking for the name",
        )
        self.line = line


class NoCategoriesError(DocumentError):
    """The document has no category headings but the operation needs one."""

    def __init__(self, message: str = "No categories found in document"):
        super().__init__(
            message,
            hint="Add a '## Category' heading or disable require_categories",
        )


class SelectionError(DocumentError):
    """The requested line range cannot be used."""

    pass


class EmptySelectionError(SelectionError):
    """The document (or the requested range) contains no lines."""

    def __init__(self, message: str = "Selection is empty"):
        super().__init__(message)


class InvalidRangeError(SelectionError):
    """Selection boundaries are inverted or outside the document."""

    def __init__(self, start: int, end: int, line_count: int):
        super().__init__(
            f"Invalid line range {start}-{end} (document has {line_count} lines)",
            details={"start": start, "end": end, "line_count": line_count},
        )
        self.start = start
        self.end = end
        self.line_count = line_count


def validate_selection(selection: Selection, line_count: int) -> None:
    """Raise a SelectionError unless ``selection`` fits a document of ``line_count`` lines."""
    if line_count == 0:
        raise EmptySelectionError("Document is empty")
    if selection.start < 1 or selection.end > line_count or selection.start > selection.end:
        raise InvalidRangeError(selection.start, selection.end, line_count)


def log_exception(
    logger: logging.Logger | Any,
    message: str,
    exc: BaseException,
    level: str = "warning",
    include_traceback: bool = True,
) -> None:
    """Log an exception with its type name.

    Args:
        logger: A stdlib logger or a StructuredLogger.
        message: What failed.
        exc: The exception.
        level: Log level name.
        include_traceback: Attach exc_info to the record.
    """
    log_fn = getattr(logger, level.lower(), logger.warning)
    text = f"{message}: {type(exc).__name__}: {exc}"
    if include_traceback:
        log_fn(text, exc_info=(type(exc), exc, exc.__traceback__))
    else:
        log_fn(text)
