"""Tests for the todo-manager error hierarchy."""

from __future__ import annotations

import logging

import pytest

from todo_manager.document.models import Selection
from todo_manager.errors import (
    ConfigurationError,
    DocumentError,
    EmptySelectionError,
    InvalidRangeError,
    NoCategoriesError,
    NotAHeadingError,
    SelectionError,
    TodoManagerError,
    log_exception,
    validate_selection,
)
from todo_manager.logging import get_logger

# =============================================================================
# Base error
# =============================================================================


class TestTodoManagerError:
    """Tests for TodoManagerError."""

    def test_message_and_details(self) -> None:
        """Test message, details and hint are stored."""
        error = TodoManagerError("Broken", details={"line": 3}, hint="Fix it")

        assert error.message == "Broken"
        assert error.details == {"line": 3}
        assert error.hint == "Fix it"

    def test_str_includes_hint(self) -> None:
        """Test the hint is appended to the string form."""
        assert str(TodoManagerError("Broken", hint="Fix it")) == "Broken\n  Hint: Fix it"
        assert str(TodoManagerError("Broken")) == "Broken"

    def test_repr(self) -> None:
        """Test repr shows the class and message."""
        assert repr(DocumentError("Broken")) == "DocumentError('Broken')"

    def test_default_details(self) -> None:
        """Test details default to an empty dict."""
        assert TodoManagerError("x").details == {}


# =============================================================================
# Hierarchy
# =============================================================================


class TestHierarchy:
    """Tests for the exception subclasses."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad"),
            NotAHeadingError("- x"),
            NoCategoriesError(),
            EmptySelectionError(),
            InvalidRangeError(3, 1, 5),
        ],
    )
    def test_all_derive_from_base(self, error: TodoManagerError) -> None:
        """Test every error can be caught as TodoManagerError."""
        assert isinstance(error, TodoManagerError)

    def test_selection_errors(self) -> None:
        """Test selection errors are document errors."""
        assert issubclass(EmptySelectionError, SelectionError)
        assert issubclass(InvalidRangeError, SelectionError)
        assert issubclass(SelectionError, DocumentError)

    def test_configuration_error_field(self) -> None:
        """Test the field is kept and added to details."""
        error = ConfigurationError("bad", field="debug")

        assert error.field == "debug"
        assert error.details == {"field": "debug"}

    def test_not_a_heading(self) -> None:
        """Test the offending line is kept."""
        error = NotAHeadingError("- x")

        assert error.line == "- x"
        assert "Not a category heading" in error.message
        assert error.hint

    def test_no_categories_has_hint(self) -> None:
        """Test the missing-categories error explains the fix."""
        error = NoCategoriesError()

        assert error.message == "No categories found in document"
        assert "## Category" in str(error)

    def test_invalid_range(self) -> None:
        """Test the range and document size are reported."""
        error = InvalidRangeError(4, 2, 3)

        assert error.message == "Invalid line range 4-2 (document has 3 lines)"
        assert error.details == {"start": 4, "end": 2, "line_count": 3}


# =============================================================================
# Helpers
# =============================================================================


class TestValidateSelection:
    """Tests for validate_selection()."""

    def test_valid(self) -> None:
        """Test a selection inside the document passes."""
        validate_selection(Selection(1, 3), 3)
        validate_selection(Selection(2, 2), 3)

    def test_empty_document(self) -> None:
        """Test an empty document is an empty selection."""
        with pytest.raises(EmptySelectionError, match="Document is empty"):
            validate_selection(Selection(1, 1), 0)

    @pytest.mark.parametrize(("start", "end"), [(0, 1), (1, 4), (3, 2), (-1, -1)])
    def test_invalid(self, start: int, end: int) -> None:
        """Test out-of-bounds and inverted ranges fail."""
        with pytest.raises(InvalidRangeError):
            validate_selection(Selection(start, end), 3)


class TestLogException:
    """Tests for log_exception()."""

    def test_stdlib_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test logging through a standard library logger."""
        logger = logging.getLogger("todo_manager.test")
        error = DocumentError("Broken")

        with caplog.at_level(logging.WARNING, logger="todo_manager"):
            log_exception(logger, "Move failed", error)

        assert "Move failed: DocumentError: Broken" in caplog.text
        assert caplog.records[0].exc_info is not None

    def test_structured_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test logging through a StructuredLogger at a chosen level."""
        logger = get_logger("test")

        with caplog.at_level(logging.ERROR, logger="todo_manager"):
            log_exception(logger, "Sort failed", ValueError("bad"), level="error", include_traceback=False)

        assert caplog.records[0].levelno == logging.ERROR
        assert caplog.records[0].getMessage() == "Sort failed: ValueError: bad"
        assert caplog.records[0].exc_info is None
