"""Console rendering of command output."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from clipkeeper.commands.protocol import CommandOutput, CommandResult
from clipkeeper.display.history_view import render_history
from clipkeeper.display.theme import Theme, load_theme


def print_output(
    console: Console,
    output: CommandOutput,
    preview_length: int,
    theme: Theme | None = None,
) -> None:
    """Print a CommandOutput: history panels for listings, text otherwise."""
    theme = theme or load_theme()
    if output.data and "entries" in output.data:
        console.print(render_history(output.data["entries"], preview_length, theme))
    if output.message:
        style = theme.error if output.result == CommandResult.ERROR else ""
        console.print(Text(output.message, style=style))
