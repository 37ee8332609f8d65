from __future__ import annotations

from typing import Annotated

import typer
from rich.text import Text

from todo_manager import __version__
from todo_manager.cli.cmds import register_lists
from todo_manager.cli.output import console
from todo_manager.logging import configure_logging


def _show_help():
    """Display a short overview of the commands."""
    console.print()
    console.print(Text(f"  todo-manager v{__version__}", style="bold #6366f1"))
    console.print(Text("  Prioritize and sort markdown to-do lists", style="dim italic"))
    console.print()

    commands = [
        ("categories", "List categories and their shortcut keys"),
        ("prioritize", "Set priorities and move items interactively"),
        ("sort", "Sort items by priority within each category"),
        ("toggle", "Toggle checkboxes on a line or range"),
    ]
    for cmd, desc in commands:
        console.print(f"    [bold #6366f1]{cmd:12}[/bold #6366f1] [dim]{desc}[/dim]")

    console.print()
    console.print("    [dim]Run[/dim] [white]todo-manager --help[/white] [dim]for all options[/dim]")
    console.print()


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"todo-manager {__version__}")
        raise typer.Exit()


_TYPER_HELP = """Prioritize, sort and reorganize markdown to-do lists.

**Quick start:**

* `todo-manager categories todo.md` - Show category shortcuts
* `todo-manager prioritize todo.md` - Walk through open items
* `todo-manager sort todo.md` - Sort by priority
"""

app = typer.Typer(
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
    help=_TYPER_HELP,
    rich_markup_mode="markdown",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    ] = "WARNING",
    log_format: Annotated[
        str,
        typer.Option("--log-format", help="Log format: human or json"),
    ] = "human",
):
    """todo-manager - markdown to-do list tooling."""
    configure_logging(level=log_level.upper(), format=log_format)
    if ctx.invoked_subcommand is None:
        _show_help()
        raise typer.Exit()


register_lists(app)


def main():
    app()


if __name__ == "__main__":
    main()
