"""Line classification for to-do documents.

A line is parsed once into a ParsedLine record; every question the other
components ask (heading? sub-item? checked? priority?) is answered from that
record instead of re-matching ad hoc patterns.

Recognized syntax:

    ## Category name           heading (configurable pattern)
    - item / * item / + item   bullet markers
    1. item                    ordinal markers
    - [ ] item / - [x] item    checkbox right after a bullet marker
    - [p2] item                priority tag (configurable pattern)
      - sub item               two or more leading whitespace characters
"""

from __future__ import annotations

import re

from todo_manager.config import TodoConfig
from todo_manager.document.models import CheckState, MarkerKind, ParsedLine
from todo_manager.errors import NotAHeadingError

# =============================================================================
# Regex Patterns
# =============================================================================

INDENT_PATTERN = re.compile(r"^(\s*)")

# Bullet marker: -, * or + followed by whitespace
BULLET_MARKER_PATTERN = re.compile(r"^\s*([-*+]\s+)")

# Ordinal marker: 12. followed by whitespace
ORDINAL_MARKER_PATTERN = re.compile(r"^\s*(\d+\.\s+)")

# Checkbox directly after a bullet marker: [ ], [] or [x]
CHECKBOX_PATTERN = re.compile(r"^\[([ x]?)\]")


class LineClassifier:
    """Answers structural questions about single lines.

    Example:
        >>> classifier = LineClassifier(TodoConfig())
        >>> parsed = classifier.parse("  - [x] [p2] Write slides")
        >>> parsed.is_sub_item, parsed.is_checked, parsed.priority, parsed.content
        (True, True, 2, 'Write slides')
    """

    def __init__(self, config: TodoConfig | None = None) -> None:
        self.config = config or TodoConfig()
        self._heading_re = re.compile(self.config.category_heading_pattern)
        self._priority_re = re.compile(self.config.priority_tag_pattern)
        self._strip_priority_re = re.compile(r"\s*(?:" + self.config.priority_tag_pattern + r")\s*")

    # =========================================================================
    # Parsing
    # =========================================================================

    def parse(self, line: str) -> ParsedLine:
        """Parse a line into its structural parts."""
        indent = INDENT_PATTERN.match(line).group(1)
        rest = line[len(indent) :]

        marker, marker_kind = self._match_marker(line)
        rest = rest[len(marker) :]

        checkbox = ""
        check_state = CheckState.ABSENT
        if marker_kind == MarkerKind.BULLET:
            box = CHECKBOX_PATTERN.match(rest)
            if box:
                checkbox = box.group(0)
                check_state = CheckState.CHECKED if box.group(1) == "x" else CheckState.UNCHECKED
                rest = rest[len(checkbox) :]

        heading = self._heading_re.match(line)

        return ParsedLine(
            text=line,
            indent=indent,
            marker=marker,
            marker_kind=marker_kind,
            checkbox=checkbox,
            check_state=check_state,
            priority=self.priority(line),
            content=self._strip_priority_re.sub(" ", rest).strip(),
            is_heading=heading is not None,
            heading_name=heading.group(1).strip() if heading else None,
        )

    def _match_marker(self, line: str) -> tuple[str, MarkerKind]:
        bullet = BULLET_MARKER_PATTERN.match(line)
        if bullet:
            return bullet.group(1), MarkerKind.BULLET
        ordinal = ORDINAL_MARKER_PATTERN.match(line)
        if ordinal:
            return ordinal.group(1), MarkerKind.ORDINAL
        return "", MarkerKind.NONE

    # =========================================================================
    # Queries
    # =========================================================================

    def is_category_heading(self, line: str) -> bool:
        return self._heading_re.match(line) is not None

    def category_name(self, line: str) -> str:
        """Name captured by the heading pattern.

        Raises:
            NotAHeadingError: If the line is not a category heading.
        """
        match = self._heading_re.match(line)
        if match is None:
            raise NotAHeadingError(line)
        return match.group(1).strip()

    def priority(self, line: str) -> int | None:
        """Number inside the first priority tag, or None."""
        match = self._priority_re.search(line)
        if match is None:
            return None
        value = match.group(1)
        return int(value) if value and value.isdigit() else None

    def list_marker(self, line: str) -> tuple[str, str]:
        """Return ``(indent, marker)``; marker is "" for plain text."""
        indent = INDENT_PATTERN.match(line).group(1)
        marker, _ = self._match_marker(line)
        return indent, marker

    def indent_width(self, line: str) -> int:
        return len(INDENT_PATTERN.match(line).group(1))

    def is_sub_item(self, line: str) -> bool:
        return self.parse(line).is_sub_item

    def check_state(self, line: str) -> CheckState:
        return self.parse(line).check_state

    def is_checked(self, line: str) -> bool:
        return self.parse(line).is_checked

    def bare_content(self, line: str) -> str:
        return self.parse(line).bare_content

    # =========================================================================
    # Rewriting
    # =========================================================================

    def _prefix(self, parsed: ParsedLine) -> str:
        prefix = parsed.indent + parsed.marker.rstrip()
        if parsed.checkbox:
            prefix += " " + parsed.checkbox
        return prefix

    def format_with_priority(self, line: str, priority: int) -> str:
        """Rewrite a top-level list line with the given priority tag.

        Sub-items and lines without a list marker are returned unchanged.
        Any existing tag is replaced, so applying the same priority twice
        gives the same line.
        """
        parsed = self.parse(line)
        if parsed.is_sub_item or not parsed.has_marker:
            return line

        formatted = self.config.priority_tag_format.format(
            prefix=self._prefix(parsed),
            priority=priority,
            content=parsed.content,
        )
        return formatted.rstrip()

    def without_priority(self, line: str) -> str:
        """Rewrite a line with its priority tag removed and spacing normalized.

        The result is ``indent + marker + " " + content`` (checkbox kept after
        the marker), or ``indent + content`` for lines without a marker.
        """
        parsed = self.parse(line)
        if not parsed.has_marker:
            return (parsed.indent + parsed.content).rstrip()
        return f"{self._prefix(parsed)} {parsed.content}".rstrip()
