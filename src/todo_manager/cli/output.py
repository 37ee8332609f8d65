"""Rich output helpers shared by CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todo_manager.document.models import Category
from todo_manager.interaction import Severity

console = Console()
err_console = Console(stderr=True)

SEVERITY_STYLES = {
    Severity.DEBUG: "dim",
    Severity.INFO: "white",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}


def print_cli_error(message: str, hint: str | None = None) -> None:
    """Print an error (and optional hint) to stderr."""
    err_console.print(f"[red]✗[/red] [bold]{escape(message)}[/bold]")
    if hint:
        err_console.print(f"  [dim]{escape(hint)}[/dim]")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def render_category_table(categories: Iterable[Category]) -> Table:
    """Table of shortcut keys and category names."""
    table = Table(title="Category Shortcuts", show_header=True, header_style="bold", box=None)
    table.add_column("Key", style="bold #6366f1", justify="center")
    table.add_column("Category")
    table.add_column("Line", justify="right", style="dim")

    for category in categories:
        table.add_row(escape(category.shortcut), escape(category.name), str(category.line_number))
    return table


def render_prompt_help(has_categories: bool) -> Text:
    """Key legend shown before an interactive run."""
    text = Text()
    text.append("Use ")
    text.append("1-9", style="bold cyan")
    if has_categories:
        text.append(" for priorities, ")
        text.append("letter shortcuts", style="bold cyan")
        text.append(" to move between categories, ")
    else:
        text.append(" for priorities, ")
    text.append("s", style="bold cyan")
    text.append(" to skip, or ")
    text.append("q", style="bold cyan")
    text.append(" to quit.")
    return text
