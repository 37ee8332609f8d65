"""Document model and the structural algorithms over it."""

from todo_manager.document.buffer import FileBuffer, InMemoryBuffer, LineBuffer, split_lines
from todo_manager.document.categories import (
    SHORTCUT_EXHAUSTED,
    UNCATEGORIZED,
    CategoryIndex,
    assign_shortcut,
)
from todo_manager.document.checkbox import ToggleOutcome, ToggleResult, toggle_checkbox
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.grouping import collect_subtree, group_items
from todo_manager.document.models import (
    Category,
    CheckState,
    ItemGroup,
    MarkerKind,
    ParsedLine,
    Selection,
)
from todo_manager.document.relocate import MovePlan, move_block, move_to_category, plan_move
from todo_manager.document.sorter import Block, sort_key, sort_range

__all__ = [
    # Models
    "Category",
    "CheckState",
    "ItemGroup",
    "MarkerKind",
    "ParsedLine",
    "Selection",
    # Classification
    "LineClassifier",
    # Categories
    "CategoryIndex",
    "SHORTCUT_EXHAUSTED",
    "UNCATEGORIZED",
    "assign_shortcut",
    # Grouping and moves
    "MovePlan",
    "collect_subtree",
    "group_items",
    "move_block",
    "move_to_category",
    "plan_move",
    # Sorting
    "Block",
    "sort_key",
    "sort_range",
    # Checkboxes
    "ToggleOutcome",
    "ToggleResult",
    "toggle_checkbox",
    # Buffers
    "FileBuffer",
    "InMemoryBuffer",
    "LineBuffer",
    "split_lines",
]
