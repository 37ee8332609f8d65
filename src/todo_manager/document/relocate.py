"""Moving items between categories.

An item travels with its whole subtree. The parent line loses its priority
tag (the item starts unprioritized in its new category); the sub-item lines
are carried byte for byte. The item is appended as the last entry of the
target category.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from todo_manager.document.categories import CategoryIndex
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.grouping import collect_subtree
from todo_manager.document.models import Category
from todo_manager.errors import DocumentError
from todo_manager.logging import get_logger

logger = get_logger("document.relocate")

T = TypeVar("T")


def move_block(items: Sequence[T], start: int, count: int, insert_before: int) -> list[T]:
    """Move ``count`` items starting at line ``start`` so they begin at ``insert_before``.

    ``insert_before`` is a line number in the sequence as it is after the
    block has been taken out. Works on any sequence, so the same move can be
    replayed on a parallel list of line handles.
    """
    remaining = list(items[: start - 1]) + list(items[start - 1 + count :])
    block = list(items[start - 1 : start - 1 + count])
    index = insert_before - 1
    return remaining[:index] + block + remaining[index:]


@dataclass(frozen=True)
class MovePlan:
    """A computed relocation, not yet applied.

    Attributes:
        start: Line number of the parent before the move.
        count: Number of lines moved (parent plus subtree).
        insert_before: Where the block lands, counted after removal.
        parent_line: Normalized parent line written at the destination.
        source_category: Category the item came from, if any.
        target_category: Category the item goes to.
    """

    start: int
    count: int
    insert_before: int
    parent_line: str
    target_category: Category
    source_category: Category | None = None

    @property
    def new_line_number(self) -> int:
        """Line number of the parent once the move is applied."""
        return self.insert_before

    @property
    def span(self) -> tuple[int, int]:
        """Smallest inclusive range of lines changed by the move.

        The move keeps the line count, so the same range addresses the old
        and the new document.
        """
        low = min(self.start, self.insert_before)
        high = max(self.start, self.insert_before) + self.count - 1
        return low, high

    def apply(self, lines: Sequence[str]) -> list[str]:
        """Return the document with the move applied."""
        moved = move_block(lines, self.start, self.count, self.insert_before)
        moved[self.new_line_number - 1] = self.parent_line
        return moved


def plan_move(
    lines: Sequence[str],
    parent_line_number: int,
    target: Category,
    classifier: LineClassifier,
    source: Category | None = None,
) -> MovePlan:
    """Work out where an item and its subtree end up in ``target``.

    Raises:
        DocumentError: If the parent line is out of range, or the target
            heading is not where the category says it is.
    """
    if not 1 <= parent_line_number <= len(lines):
        raise DocumentError(
            f"Line {parent_line_number} is outside the document",
            details={"line_number": parent_line_number, "line_count": len(lines)},
        )
    if not (
        1 <= target.line_number <= len(lines)
        and classifier.is_category_heading(lines[target.line_number - 1])
    ):
        raise DocumentError(
            f"Category '{target.name}' is no longer at line {target.line_number}",
            hint="Rescan categories after editing the document",
        )

    subtree = collect_subtree(lines, parent_line_number, classifier)
    count = 1 + len(subtree)
    if parent_line_number <= target.line_number < parent_line_number + count:
        raise DocumentError(f"Cannot move an item into its own subtree ('{target.name}')")

    parent_line = classifier.without_priority(lines[parent_line_number - 1])

    remaining = list(lines[: parent_line_number - 1]) + list(lines[parent_line_number - 1 + count :])
    heading = target.line_number
    if heading > parent_line_number:
        heading -= count
    shifted = Category(name=target.name, shortcut=target.shortcut, line_number=heading)
    insert_before = CategoryIndex.end_of(shifted, remaining, classifier)

    return MovePlan(
        start=parent_line_number,
        count=count,
        insert_before=insert_before,
        parent_line=parent_line,
        target_category=target,
        source_category=source,
    )


def move_to_category(
    lines: Sequence[str],
    parent_line_number: int,
    target: Category,
    classifier: LineClassifier,
) -> tuple[list[str], int]:
    """Move an item with its subtree to the end of ``target``.

    Returns:
        ``(new_lines, new_parent_line_number)``
    """
    plan = plan_move(lines, parent_line_number, target, classifier)
    logger.debug(
        "item_relocated",
        from_line=plan.start,
        to_line=plan.new_line_number,
        line_total=plan.count,
        category=target.name,
    )
    return plan.apply(lines), plan.new_line_number
