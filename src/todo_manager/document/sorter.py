"""Category-aware priority sort.

The selected lines are cut into blocks at every heading. Inside a block the
heading stays on top and the item groups are reordered by:

1. unchecked before checked (only the parent line counts),
2. priority ascending, untagged items after tagged ones,
3. original order for everything else.

Sub-items move with their parent and keep their internal order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from todo_manager.document.categories import UNCATEGORIZED, CategoryIndex
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.grouping import group_items
from todo_manager.document.models import ItemGroup, Selection
from todo_manager.errors import validate_selection
from todo_manager.logging import get_logger

logger = get_logger("document.sorter")


@dataclass
class Block:
    """Contiguous selected lines belonging to one category.

    Attributes:
        category: Name of the category the lines belong to.
        heading: Heading line when the block starts with one.
        lines: The lines after the heading.
    """

    category: str
    heading: str | None = None
    lines: list[str] = field(default_factory=list)


def sort_key(group: ItemGroup) -> tuple[bool, bool, int, int]:
    """Ordering key for an item group; smaller sorts first."""
    has_priority = group.priority is not None
    return (
        group.checked,
        not has_priority,
        group.priority if has_priority else 0,
        group.position,
    )


def split_blocks(
    lines: Sequence[str],
    start_line: int,
    classifier: LineClassifier,
    categories: CategoryIndex,
) -> list[Block]:
    """Cut selected lines into per-category blocks.

    Lines before the first heading in the selection form a block named after
    the category that contains them in the full document.
    """
    blocks: list[Block] = []
    for offset, line in enumerate(lines):
        if classifier.is_category_heading(line):
            blocks.append(Block(category=classifier.category_name(line), heading=line))
            continue
        if not blocks:
            owner = categories.category_at(start_line + offset)
            blocks.append(Block(category=owner.name if owner else UNCATEGORIZED))
        blocks[-1].lines.append(line)
    return blocks


def sort_block(block: Block, classifier: LineClassifier) -> list[str]:
    """Sorted lines of one block, heading first."""
    leading, groups = group_items(block.lines, classifier)
    ordered = sorted(groups, key=sort_key)

    result: list[str] = [block.heading] if block.heading is not None else []
    result.extend(leading)
    for group in ordered:
        result.extend(group.lines())
    return result


def sort_range(
    lines: Sequence[str],
    selection: Selection,
    classifier: LineClassifier,
    categories: CategoryIndex | None = None,
) -> list[str]:
    """Sort the selected lines of a document.

    Args:
        lines: The whole document.
        selection: Lines to sort.
        classifier: Line classifier.
        categories: Category index of ``lines``; scanned when omitted.

    Returns:
        Replacement for the selected lines, same length as the selection.

    Raises:
        SelectionError: If the selection does not fit the document.
    """
    validate_selection(selection, len(lines))
    if categories is None:
        categories = CategoryIndex.scan(lines, classifier)

    selected = lines[selection.start - 1 : selection.end]
    blocks = split_blocks(selected, selection.start, classifier, categories)

    result: list[str] = []
    for block in blocks:
        result.extend(sort_block(block, classifier))

    logger.debug(
        "range_sorted",
        start=selection.start,
        end=selection.end,
        blocks=len(blocks),
    )
    return result
