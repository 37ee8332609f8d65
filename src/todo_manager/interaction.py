"""Collaborators for interactive runs.

The prioritizer never talks to the user directly. It asks a Prompter what to
do with each item and reports progress to a Notifier. The CLI provides rich
console implementations; tests and editor integrations provide their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from todo_manager.logging import get_logger

logger = get_logger("interaction")

ESCAPE = "\x1b"

QUIT_RESPONSES = frozenset({"q", "quit", ESCAPE})
SKIP_RESPONSES = frozenset({"s", "skip"})


class Severity(str, Enum):
    """Importance of a notice shown to the user."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ActionType(Enum):
    """What the user chose for one item.

    Actions:
        PRIORITY: Tag the item with a priority 1-9.
        MOVE: Move the item to the category with the given shortcut.
        SKIP: Leave the item as it is.
        QUIT: Stop the run; earlier edits are kept.
    """

    PRIORITY = "priority"
    MOVE = "move"
    SKIP = "skip"
    QUIT = "quit"


@dataclass(frozen=True)
class PromptAction:
    """A parsed prompt response.

    Attributes:
        type: The action type.
        priority: Priority for PRIORITY actions.
        shortcut: Category shortcut for MOVE actions.
    """

    type: ActionType
    priority: int | None = None
    shortcut: str | None = None

    @classmethod
    def parse(cls, response: str) -> PromptAction:
        """Interpret a raw response.

        ``q``/``quit``/Escape quit, ``s``/``skip`` skip, ``1``-``9`` set a
        priority, and anything else is taken as a category shortcut.
        """
        normalized = response if response == ESCAPE else response.strip().lower()
        if normalized in QUIT_RESPONSES:
            return cls(ActionType.QUIT)
        if normalized in SKIP_RESPONSES:
            return cls(ActionType.SKIP)
        if len(normalized) == 1 and normalized in "123456789":
            return cls(ActionType.PRIORITY, priority=int(normalized))
        return cls(ActionType.MOVE, shortcut=normalized)

    @classmethod
    def quit(cls) -> PromptAction:
        return cls(ActionType.QUIT)

    @classmethod
    def skip(cls) -> PromptAction:
        return cls(ActionType.SKIP)


@runtime_checkable
class Prompter(Protocol):
    """Asks the user what to do with one item."""

    def prompt(self, line: str, category: str | None) -> str | PromptAction:
        """Return a raw response or a PromptAction for ``line``."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Shows status messages. Never affects control flow."""

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None: ...


class LoggingNotifier:
    """Notifier that forwards notices to the package log."""

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        log_fn = getattr(logger, severity.value, logger.info)
        log_fn(message)


class RecordingNotifier:
    """Notifier that keeps every notice, for tests and batch callers."""

    def __init__(self) -> None:
        self.notices: list[tuple[str, Severity]] = []

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.notices.append((message, severity))

    def messages(self, severity: Severity | None = None) -> list[str]:
        return [m for m, s in self.notices if severity is None or s == severity]
