"""Checkbox toggling for list items."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Bullet line with a checkbox: "- [ ] text", "- [] text", "- [x] text"
CHECKBOX_LINE_PATTERN = re.compile(r"^(\s*[-*+]\s+)\[([ x]?)\](.*)$")

# Any bullet line
BULLET_LINE_PATTERN = re.compile(r"^(\s*[-*+]\s+)(.*)$")


class ToggleOutcome(str, Enum):
    """What toggle_checkbox did to a line."""

    CHECKED = "checked"
    UNCHECKED = "unchecked"
    CREATED = "created"
    NOT_A_LIST_ITEM = "not_a_list_item"


@dataclass(frozen=True)
class ToggleResult:
    line: str
    outcome: ToggleOutcome

    @property
    def changed(self) -> bool:
        return self.outcome != ToggleOutcome.NOT_A_LIST_ITEM


def toggle_checkbox(line: str) -> ToggleResult:
    """Flip a list item's checkbox.

    An existing box flips between ``[ ]`` and ``[x]``. A bullet without a
    box gets a checked one. Other lines come back unchanged.
    """
    match = CHECKBOX_LINE_PATTERN.match(line)
    if match:
        prefix, state, suffix = match.groups()
        if state == "x":
            return ToggleResult(f"{prefix}[ ]{suffix}", ToggleOutcome.UNCHECKED)
        return ToggleResult(f"{prefix}[x]{suffix}", ToggleOutcome.CHECKED)

    match = BULLET_LINE_PATTERN.match(line)
    if match:
        prefix, content = match.groups()
        return ToggleResult(f"{prefix}[x] {content}", ToggleOutcome.CREATED)

    return ToggleResult(line, ToggleOutcome.NOT_A_LIST_ITEM)
