"""Console implementations of the interactive collaborators."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from todo_manager.cli.output import SEVERITY_STYLES
from todo_manager.cli.output import console as default_console
from todo_manager.interaction import PromptAction, Severity


class ConsoleNotifier:
    """Prints notices to the console, styled by severity."""

    def __init__(self, console: Console | None = None, show_debug: bool = False) -> None:
        self.console = console or default_console
        self.show_debug = show_debug

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.DEBUG and not self.show_debug:
            return
        style = SEVERITY_STYLES.get(severity, "white")
        self.console.print(f"[{style}]{escape(message)}[/{style}]")


class ConsolePrompter:
    """Asks for one key per item on the console.

    An answer is a single key (``1``-``9``, a category shortcut, ``s`` or
    ``q``) or one of the words ``skip`` and ``quit``. Longer answers such as
    ``"10"`` or ``"work"`` are rejected with a warning and the item is asked
    again. An empty answer skips; end of input and Ctrl-C quit the run.

    Args:
        console: Console for the prompt text.
        get_input: Optional callable for testing (replaces console.input).
    """

    WORDS = ("skip", "quit")

    def __init__(
        self,
        console: Console | None = None,
        get_input: Callable[[str], str] | None = None,
    ) -> None:
        self.console = console or default_console
        self._input = get_input if get_input is not None else self.console.input
        self.count = 0

    def prompt(self, line: str, category: str | None) -> str | PromptAction:
        self.count += 1
        label = f"Item {self.count}"
        if category:
            label += f" (in {escape(category)})"
        text = f"[bold cyan]{label}:[/bold cyan] {escape(line.strip())} > "

        while True:
            try:
                response = self._input(text)
            except (EOFError, KeyboardInterrupt):
                return PromptAction.quit()

            response = response.strip()
            if not response:
                return PromptAction.skip()
            if len(response) == 1 or response.lower() in self.WORDS:
                return response
            self.console.print(
                f"[yellow]Answer with a single key: 1-9, a shortcut, s or q "
                f"(got '{escape(response)}')[/yellow]"
            )
