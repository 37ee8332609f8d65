import os

from dotenv import find_dotenv, load_dotenv

if not os.environ.get("TODO_MANAGER_ENV_LOADED"):
    load_dotenv(find_dotenv(usecwd=True))
    os.environ["TODO_MANAGER_ENV_LOADED"] = "1"

from todo_manager.config import TodoConfig
from todo_manager.document import (
    SHORTCUT_EXHAUSTED,
    Category,
    CategoryIndex,
    CheckState,
    FileBuffer,
    InMemoryBuffer,
    ItemGroup,
    LineBuffer,
    LineClassifier,
    MarkerKind,
    ParsedLine,
    Selection,
    assign_shortcut,
    collect_subtree,
    move_to_category,
    sort_range,
    toggle_checkbox,
)
from todo_manager.errors import (
    ConfigurationError,
    DocumentError,
    EmptySelectionError,
    InvalidRangeError,
    NoCategoriesError,
    NotAHeadingError,
    SelectionError,
    TodoManagerError,
)
from todo_manager.interaction import (
    ActionType,
    Notifier,
    PromptAction,
    Prompter,
    RecordingNotifier,
    Severity,
)
from todo_manager.logging import configure_logging, get_logger
from todo_manager.prioritizer import PrioritizeResult, Prioritizer, RunStatus
from todo_manager.session import OperationResult, TodoSession

__version__ = "0.3.0"

__all__ = [
    # Config
    "TodoConfig",
    # Document
    "Category",
    "CategoryIndex",
    "CheckState",
    "FileBuffer",
    "InMemoryBuffer",
    "ItemGroup",
    "LineBuffer",
    "LineClassifier",
    "MarkerKind",
    "ParsedLine",
    "SHORTCUT_EXHAUSTED",
    "Selection",
    "assign_shortcut",
    "collect_subtree",
    "move_to_category",
    "sort_range",
    "toggle_checkbox",
    # Operations
    "OperationResult",
    "PrioritizeResult",
    "Prioritizer",
    "RunStatus",
    "TodoSession",
    # Interaction
    "ActionType",
    "Notifier",
    "PromptAction",
    "Prompter",
    "RecordingNotifier",
    "Severity",
    # Errors
    "ConfigurationError",
    "DocumentError",
    "EmptySelectionError",
    "InvalidRangeError",
    "NoCategoriesError",
    "NotAHeadingError",
    "SelectionError",
    "TodoManagerError",
    # Logging
    "configure_logging",
    "get_logger",
]
