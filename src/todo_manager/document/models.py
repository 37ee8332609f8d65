"""Data models for to-do documents.

Everything here is derived from the document's lines for the duration of one
operation. Nothing is cached across edits: any insertion or removal changes
line numbers, so categories and groups are rebuilt from the current lines.

Line numbers are 1-indexed, matching the host buffer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

SUB_ITEM_MIN_INDENT = 2


class MarkerKind(str, Enum):
    """Kind of list marker at the start of a line."""

    BULLET = "bullet"
    ORDINAL = "ordinal"
    NONE = "none"


class CheckState(str, Enum):
    """Checkbox state following a bullet marker."""

    UNCHECKED = "unchecked"
    CHECKED = "checked"
    ABSENT = "absent"


@dataclass(frozen=True)
class ParsedLine:
    """Structured view of a single line.

    Attributes:
        text: The original line.
        indent: Leading whitespace, verbatim.
        marker: List marker including its trailing whitespace (``"- "``, ``"2. "``) or "".
        marker_kind: Kind of marker.
        checkbox: Checkbox token as written (``"[ ]"``, ``"[x]"``) or "".
        check_state: Checkbox state.
        priority: Priority tag number, if present.
        content: Text with marker, checkbox and priority tag removed, trimmed.
        is_heading: Whether the line is a category heading.
        heading_name: Category name for headings.
    """

    text: str
    indent: str = ""
    marker: str = ""
    marker_kind: MarkerKind = MarkerKind.NONE
    checkbox: str = ""
    check_state: CheckState = CheckState.ABSENT
    priority: int | None = None
    content: str = ""
    is_heading: bool = False
    heading_name: str | None = None

    @property
    def indent_width(self) -> int:
        return len(self.indent)

    @property
    def is_sub_item(self) -> bool:
        """Indented by at least two whitespace characters."""
        return self.indent_width >= SUB_ITEM_MIN_INDENT

    @property
    def is_checked(self) -> bool:
        return self.check_state == CheckState.CHECKED

    @property
    def has_marker(self) -> bool:
        return self.marker_kind != MarkerKind.NONE

    @property
    def bare_content(self) -> str:
        """Content with the original indentation kept."""
        return self.indent + self.content


@dataclass(frozen=True)
class Category:
    """A heading-delimited section of the document.

    Attributes:
        name: Heading text.
        shortcut: Single character used to target this category.
        line_number: Line number of the heading. The section runs until the
            next heading or the end of the document.
    """

    name: str
    shortcut: str
    line_number: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "shortcut": self.shortcut,
            "line_number": self.line_number,
        }


@dataclass
class ItemGroup:
    """A parent line and the sub-item lines that travel with it.

    Attributes:
        parent: The parent line.
        sub_items: Following, more indented lines, verbatim and in order.
        position: Index of the group within its block before sorting.
        priority: Priority of the parent line.
        checked: Whether the parent line is checked.
    """

    parent: str
    sub_items: list[str] = field(default_factory=list)
    position: int = 0
    priority: int | None = None
    checked: bool = False

    @property
    def size(self) -> int:
        return 1 + len(self.sub_items)

    def lines(self) -> list[str]:
        """Parent followed by its sub-items."""
        return [self.parent, *self.sub_items]


@dataclass(frozen=True)
class Selection:
    """Inclusive range of line numbers."""

    start: int
    end: int

    @classmethod
    def whole(cls, line_count: int) -> Selection:
        """Select every line of a document."""
        return cls(1, line_count)

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def contains(self, line_number: int) -> bool:
        return self.start <= line_number <= self.end

    def line_numbers(self) -> range:
        return range(self.start, self.end + 1)
