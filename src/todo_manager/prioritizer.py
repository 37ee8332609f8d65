"""Interactive prioritization of a range of items.

Each candidate item in the selection is offered to a Prompter, one at a time.
The answer either tags the item with a priority, moves it (with its subtree)
to another category, skips it, or ends the run. Every accepted edit is
written to the buffer immediately as one replace; quitting keeps them.

Moves shift line numbers. Instead of patching recorded positions, each line
of the document gets a handle in an arena that is reordered exactly like the
lines themselves, and an item's current line number is looked up from its
handle when it is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from todo_manager.config import TodoConfig
from todo_manager.document.buffer import LineBuffer
from todo_manager.document.categories import CategoryIndex
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.models import Category, Selection
from todo_manager.document.relocate import move_block, plan_move
from todo_manager.errors import (
    NoCategoriesError,
    TodoManagerError,
    log_exception,
    validate_selection,
)
from todo_manager.interaction import (
    ActionType,
    LoggingNotifier,
    Notifier,
    PromptAction,
    Prompter,
    Severity,
)
from todo_manager.logging import get_logger

logger = get_logger("prioritizer")


class RunStatus(str, Enum):
    """How a prioritization run ended."""

    COMPLETED = "completed"
    QUIT = "quit"
    ABORTED = "aborted"


@dataclass
class PrioritizeResult:
    """Summary of a prioritization run.

    Attributes:
        status: How the run ended.
        offered: Items shown to the prompter (re-offers after a move count again).
        prioritized: Priority tags written.
        moved: Items relocated.
        skipped: Items explicitly skipped.
        error: The error that aborted the run, if any.
    """

    status: RunStatus = RunStatus.COMPLETED
    offered: int = 0
    prioritized: int = 0
    moved: int = 0
    skipped: int = 0
    error: TodoManagerError | None = None

    @property
    def aborted(self) -> bool:
        return self.status == RunStatus.ABORTED


class _LineHandle:
    """Stable identity of one document line across moves."""

    __slots__ = ()


class Prioritizer:
    """Drives one prioritization run over a selection.

    Example:
        >>> prioritizer = Prioritizer(TodoConfig(), prompter, notifier)
        >>> result = prioritizer.run(buffer, Selection(3, 12), skip_prioritized=True)
        >>> print(result.prioritized, result.moved)

    Attributes:
        config: Shared configuration.
        classifier: Line classifier built from the config.
    """

    def __init__(
        self,
        config: TodoConfig | None = None,
        prompter: Prompter | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.config = config or TodoConfig()
        self.classifier = LineClassifier(self.config)
        self.prompter = prompter
        self.notifier = notifier or LoggingNotifier()

    def _notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.DEBUG and not self.config.debug:
            return
        self.notifier.notify(message, severity)

    def is_candidate(self, line: str) -> bool:
        """Whether a line can be offered: a non-blank, unchecked, top-level item."""
        if not line.strip():
            return False
        parsed = self.classifier.parse(line)
        return not (parsed.is_checked or parsed.is_heading or parsed.is_sub_item)

    # =========================================================================
    # Run
    # =========================================================================

    def run(
        self,
        buffer: LineBuffer,
        selection: Selection | None = None,
        skip_prioritized: bool = False,
    ) -> PrioritizeResult:
        """Offer every candidate in ``selection`` to the prompter.

        Args:
            buffer: Document to edit.
            selection: Lines to process; the whole document when omitted.
            skip_prioritized: Leave items that already carry a tag alone.

        Returns:
            Run summary. Validation failures are reported through the
            notifier and give an ABORTED result with nothing edited.
        """
        if self.prompter is None:
            raise TodoManagerError("Prioritizer needs a prompter to run")

        lines = buffer.read_lines()
        if selection is None:
            selection = Selection.whole(len(lines))

        try:
            validate_selection(selection, len(lines))
            categories = CategoryIndex.scan(lines, self.classifier)
            if not categories and self.config.require_categories:
                raise NoCategoriesError()
        except TodoManagerError as e:
            logger.warning("prioritize_aborted", reason=e.message)
            self._notify(str(e), Severity.ERROR)
            return PrioritizeResult(status=RunStatus.ABORTED, error=e)

        if not categories:
            self._notify("No categories found. You can only set priorities.", Severity.WARNING)

        arena = [_LineHandle() for _ in lines]
        candidates = [
            arena[n - 1] for n in selection.line_numbers() if self.is_candidate(lines[n - 1])
        ]
        logger.info(
            "prioritize_started",
            start=selection.start,
            end=selection.end,
            candidates=len(candidates),
            categories=len(categories),
        )

        result = PrioritizeResult()
        cursor = 0
        while cursor < len(candidates):
            line_number = arena.index(candidates[cursor]) + 1
            line = lines[line_number - 1]

            if skip_prioritized and self.classifier.priority(line) is not None:
                cursor += 1
                continue

            current = categories.category_at(line_number)
            result.offered += 1
            action = self._ask(line, current)

            if action.type == ActionType.QUIT:
                result.status = RunStatus.QUIT
                break

            if action.type == ActionType.SKIP:
                result.skipped += 1
                self._notify("Skipped")

            elif action.type == ActionType.PRIORITY:
                new_line = self.classifier.format_with_priority(line, action.priority)
                if new_line != line:
                    buffer.replace_lines(line_number, line_number, [new_line])
                    lines[line_number - 1] = new_line
                    result.prioritized += 1
                    logger.debug(
                        "priority_assigned", line_number=line_number, priority=action.priority
                    )
                else:
                    self._notify(f"Line {line_number} is not a list item", Severity.DEBUG)

            elif action.type == ActionType.MOVE:
                target = categories.by_shortcut(action.shortcut)
                if target is not None and (current is None or current != target):
                    try:
                        plan = plan_move(lines, line_number, target, self.classifier, source=current)
                    except TodoManagerError as e:
                        log_exception(logger, "move_failed", e, include_traceback=False)
                        self._notify(str(e), Severity.ERROR)
                        cursor += 1
                        continue

                    low, high = plan.span
                    lines = plan.apply(lines)
                    buffer.replace_lines(low, high, lines[low - 1 : high])
                    arena = move_block(arena, plan.start, plan.count, plan.insert_before)
                    # Headings never move, so shortcuts stay the same; only positions change.
                    categories = CategoryIndex.scan(lines, self.classifier)

                    result.moved += 1
                    logger.debug(
                        "item_relocated",
                        from_line=plan.start,
                        to_line=plan.new_line_number,
                        line_total=plan.count,
                        category=target.name,
                    )
                    self._notify(f"Moved to {target.name}")
                    # Offer the same item again at its new position.
                    continue

                self._notify(f"No move for shortcut {action.shortcut!r}", Severity.DEBUG)

            cursor += 1

        logger.info(
            "prioritize_finished",
            status=result.status.value,
            prioritized=result.prioritized,
            moved=result.moved,
            skipped=result.skipped,
        )
        self._notify("Prioritization complete")
        return result

    def _ask(self, line: str, current: Category | None) -> PromptAction:
        response = self.prompter.prompt(line, current.name if current else None)
        if isinstance(response, PromptAction):
            return response
        return PromptAction.parse(response)
