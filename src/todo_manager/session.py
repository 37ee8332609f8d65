"""Batch operations on one document.

TodoSession ties a LineBuffer to a configuration and exposes the non
interactive operations (sort, toggle, category listing) plus a shortcut into
the interactive Prioritizer. Each operation validates its selection before
touching the buffer and writes its result with a single replace.
"""

from __future__ import annotations

from dataclasses import dataclass

from todo_manager.config import TodoConfig
from todo_manager.document.buffer import LineBuffer
from todo_manager.document.categories import CategoryIndex
from todo_manager.document.checkbox import ToggleOutcome, toggle_checkbox
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.models import Selection
from todo_manager.document.sorter import sort_range
from todo_manager.errors import TodoManagerError, validate_selection
from todo_manager.interaction import LoggingNotifier, Notifier, Prompter, Severity
from todo_manager.logging import get_logger
from todo_manager.prioritizer import PrioritizeResult, Prioritizer

logger = get_logger("session")


@dataclass
class OperationResult:
    """Outcome of a batch operation.

    Attributes:
        selection: Range the operation covered.
        changed: Number of lines whose text changed.
        error: Error that stopped the operation before any edit.
    """

    selection: Selection | None = None
    changed: int = 0
    error: TodoManagerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TodoSession:
    """Operations on a single document.

    Example:
        >>> session = TodoSession(FileBuffer.open("todo.md"))
        >>> session.sort()
        >>> session.buffer.save()
    """

    def __init__(
        self,
        buffer: LineBuffer,
        config: TodoConfig | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.buffer = buffer
        self.config = config or TodoConfig()
        self.classifier = LineClassifier(self.config)
        self.notifier = notifier or LoggingNotifier()

    def _notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.DEBUG and not self.config.debug:
            return
        self.notifier.notify(message, severity)

    def _resolve(self, selection: Selection | None, lines: list[str]) -> Selection:
        selection = selection or Selection.whole(len(lines))
        validate_selection(selection, len(lines))
        return selection

    def _fail(self, operation: str, error: TodoManagerError) -> OperationResult:
        logger.warning(f"{operation}_aborted", reason=error.message)
        self._notify(str(error), Severity.ERROR)
        return OperationResult(error=error)

    # =========================================================================
    # Operations
    # =========================================================================

    def categories(self) -> CategoryIndex:
        """Scan the current document for categories."""
        return CategoryIndex.scan(self.buffer.read_lines(), self.classifier)

    def sort(self, selection: Selection | None = None) -> OperationResult:
        """Sort items by priority within each category of the selection."""
        lines = self.buffer.read_lines()
        try:
            selection = self._resolve(selection, lines)
            sorted_lines = sort_range(lines, selection, self.classifier)
        except TodoManagerError as e:
            return self._fail("sort", e)

        original = lines[selection.start - 1 : selection.end]
        changed = sum(1 for old, new in zip(original, sorted_lines) if old != new)
        if changed:
            self.buffer.replace_lines(selection.start, selection.end, sorted_lines)

        logger.info("range_sorted", start=selection.start, end=selection.end, changed=changed)
        self._notify("Sorting complete")
        return OperationResult(selection=selection, changed=changed)

    def toggle(self, selection: Selection | None = None) -> OperationResult:
        """Toggle the checkbox of every line in the selection."""
        lines = self.buffer.read_lines()
        try:
            selection = self._resolve(selection, lines)
        except TodoManagerError as e:
            return self._fail("toggle", e)

        toggled: list[str] = []
        changed = 0
        for line_number in selection.line_numbers():
            result = toggle_checkbox(lines[line_number - 1])
            toggled.append(result.line)
            if result.outcome == ToggleOutcome.NOT_A_LIST_ITEM:
                self._notify(f"No list item found on line {line_number}", Severity.WARNING)
                continue
            changed += 1
            if result.outcome == ToggleOutcome.CREATED:
                self._notify("Checkbox created (checked)")
            else:
                self._notify(f"Checkbox toggled ({result.outcome.value})")

        if changed:
            self.buffer.replace_lines(selection.start, selection.end, toggled)
        return OperationResult(selection=selection, changed=changed)

    def prioritize(
        self,
        prompter: Prompter,
        selection: Selection | None = None,
        skip_prioritized: bool = False,
    ) -> PrioritizeResult:
        """Run the interactive prioritizer on this document."""
        prioritizer = Prioritizer(self.config, prompter, self.notifier)
        return prioritizer.run(self.buffer, selection, skip_prioritized=skip_prioritized)
