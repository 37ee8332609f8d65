"""
CLI commands for editing to-do lists.

Usage:
    todo-manager categories todo.md
    todo-manager prioritize todo.md --start 3 --end 20 --new-only
    todo-manager sort todo.md
    todo-manager sort todo.md --start 10 --end 18 --dry-run
    todo-manager toggle todo.md --start 4

Ranges are 1-indexed and inclusive; without --start/--end a command covers
the whole file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from todo_manager.cli.console import ConsoleNotifier, ConsolePrompter
from todo_manager.cli.output import (
    console,
    print_cli_error,
    print_success,
    render_category_table,
    render_prompt_help,
)
from todo_manager.config import TodoConfig
from todo_manager.document.buffer import FileBuffer
from todo_manager.document.models import Selection
from todo_manager.errors import TodoManagerError
from todo_manager.prioritizer import RunStatus
from todo_manager.session import TodoSession

FileArg = Annotated[
    Path,
    typer.Argument(help="Markdown file with the to-do list", dir_okay=False),
]
StartOpt = Annotated[
    int | None,
    typer.Option("--start", "-s", help="First line of the range (1-indexed)"),
]
EndOpt = Annotated[
    int | None,
    typer.Option("--end", "-e", help="Last line of the range (inclusive)"),
]


# =============================================================================
# Helpers
# =============================================================================


def _load_config(debug: bool = False) -> TodoConfig:
    try:
        return TodoConfig.from_env(debug=True if debug else None)
    except TodoManagerError as e:
        print_cli_error(e.message, hint=e.hint)
        raise typer.Exit(1)


def _open_buffer(path: Path) -> FileBuffer:
    try:
        return FileBuffer.open(path)
    except FileNotFoundError as e:
        print_cli_error(str(e))
        raise typer.Exit(1)


def _selection(start: int | None, end: int | None, line_count: int) -> Selection | None:
    if start is None and end is None:
        return None
    return Selection(
        start if start is not None else 1,
        end if end is not None else line_count,
    )


# =============================================================================
# categories
# =============================================================================


def categories_cmd(
    file: FileArg,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
):
    """List categories and their shortcut keys."""
    config = _load_config()
    session = TodoSession(_open_buffer(file), config)
    index = session.categories()

    if output_json:
        typer.echo(json.dumps([c.to_dict() for c in index], indent=2))
        return

    if not index:
        print_cli_error("No categories found", hint="Categories are '## Name' headings")
        raise typer.Exit(1)
    console.print(render_category_table(index))


# =============================================================================
# prioritize
# =============================================================================


def prioritize_cmd(
    file: FileArg,
    start: StartOpt = None,
    end: EndOpt = None,
    new_only: Annotated[
        bool,
        typer.Option("--new-only", "-n", help="Only offer items without a priority tag"),
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug notices")] = False,
):
    """Interactively set priorities and move items between categories."""
    config = _load_config(debug)
    buffer = _open_buffer(file)
    session = TodoSession(buffer, config, ConsoleNotifier(show_debug=config.debug))

    index = session.categories()
    if index:
        console.print(render_category_table(index))
    console.print(render_prompt_help(bool(index)))
    console.print()

    result = session.prioritize(
        ConsolePrompter(),
        _selection(start, end, buffer.line_count),
        skip_prioritized=new_only,
    )
    if result.status == RunStatus.ABORTED:
        raise typer.Exit(1)

    if result.prioritized or result.moved:
        buffer.save()
    print_success(
        f"{result.prioritized} prioritized, {result.moved} moved, {result.skipped} skipped"
        + (" (quit)" if result.status == RunStatus.QUIT else "")
    )


# =============================================================================
# sort
# =============================================================================


def sort_cmd(
    file: FileArg,
    start: StartOpt = None,
    end: EndOpt = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the sorted lines instead of saving"),
    ] = False,
):
    """Sort items by priority within each category."""
    config = _load_config()
    buffer = _open_buffer(file)
    session = TodoSession(buffer, config, ConsoleNotifier(show_debug=config.debug))

    result = session.sort(_selection(start, end, buffer.line_count))
    if not result.ok:
        raise typer.Exit(1)

    if dry_run:
        selection = result.selection
        for line in buffer.read_lines()[selection.start - 1 : selection.end]:
            typer.echo(line)
        return

    if result.changed:
        buffer.save()
    print_success(f"Sorted lines {result.selection.start}-{result.selection.end}")


# =============================================================================
# toggle
# =============================================================================


def toggle_cmd(
    file: FileArg,
    start: Annotated[int, typer.Option("--start", "-s", help="Line to toggle (1-indexed)")],
    end: EndOpt = None,
):
    """Toggle checkboxes on one line or a range of lines."""
    config = _load_config()
    buffer = _open_buffer(file)
    session = TodoSession(buffer, config, ConsoleNotifier(show_debug=config.debug))

    result = session.toggle(Selection(start, end if end is not None else start))
    if not result.ok:
        raise typer.Exit(1)
    if result.changed:
        buffer.save()


def register(parent: typer.Typer):
    """Register list commands with the parent CLI app."""
    parent.command("categories", rich_help_panel="Lists")(categories_cmd)
    parent.command("prioritize", rich_help_panel="Lists")(prioritize_cmd)
    parent.command("sort", rich_help_panel="Lists")(sort_cmd)
    parent.command("toggle", rich_help_panel="Lists")(toggle_cmd)
