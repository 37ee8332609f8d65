"""Grouping of parent items with their sub-items."""

from __future__ import annotations

from collections.abc import Sequence

from todo_manager.document.classifier import LineClassifier
from todo_manager.document.models import ItemGroup


def collect_subtree(
    lines: Sequence[str],
    parent_line_number: int,
    classifier: LineClassifier,
) -> list[str]:
    """Lines following the parent that are indented deeper than it.

    Stops at the first line indented no deeper than the parent, or at the end
    of the document. Lines are returned exactly as written.
    """
    parent_indent = classifier.indent_width(lines[parent_line_number - 1])
    subtree: list[str] = []
    for line in lines[parent_line_number:]:
        if classifier.indent_width(line) <= parent_indent:
            break
        subtree.append(line)
    return subtree


def group_items(
    lines: Sequence[str],
    classifier: LineClassifier,
) -> tuple[list[str], list[ItemGroup]]:
    """Split a run of lines into item groups.

    Every line that is not a sub-item starts a group; the sub-item lines
    right after it belong to that group. Sub-item lines at the very start,
    with no parent inside ``lines``, are returned separately as the first
    element so they can stay where they are.

    Returns:
        ``(leading_sub_items, groups)``
    """
    leading: list[str] = []
    groups: list[ItemGroup] = []

    for line in lines:
        parsed = classifier.parse(line)
        if parsed.is_sub_item and not parsed.is_heading:
            if groups:
                groups[-1].sub_items.append(line)
            else:
                leading.append(line)
            continue

        groups.append(
            ItemGroup(
                parent=line,
                position=len(groups),
                priority=parsed.priority,
                checked=parsed.is_checked,
            )
        )

    return leading, groups
