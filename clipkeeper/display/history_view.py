"""Rendering of clipboard history for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clipkeeper.core.constants import DEFAULT_PREVIEW_LENGTH, HISTORY_TITLE
from clipkeeper.core.text_safety import one_line, strip_terminal_escapes
from clipkeeper.display.theme import Theme, load_theme
from clipkeeper.history.types import HistoryEntry

EMPTY_MESSAGE = "No clipboard history yet"


def item_count(count: int) -> str:
    return f"{count} item" if count == 1 else f"{count} items"


def format_entry_preview(entry: HistoryEntry, max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Single-line, escape-free preview of an entry."""
    return one_line(strip_terminal_escapes(entry.preview(max_length)))


def render_history(
    entries: Sequence[HistoryEntry],
    preview_length: int = DEFAULT_PREVIEW_LENGTH,
    theme: Theme | None = None,
) -> RenderableType:
    """Build the history panel: one row per entry, most recent first.

    Each row shows the truncated preview and an "N. X characters" line.
    """
    theme = theme or load_theme()

    if not entries:
        body: RenderableType = Text(EMPTY_MESSAGE, style=theme.empty)
    else:
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right", style=theme.index, no_wrap=True)
        table.add_column(ratio=1)
        for index, entry in enumerate(entries):
            cell = Text()
            # Text() treats content literally, so no markup escaping is needed
            cell.append(format_entry_preview(entry, preview_length), style=theme.preview)
            cell.append("\n")
            cell.append(entry.info(index), style=theme.info)
            table.add_row(f"{index + 1}", cell)
        body = table

    return Panel(
        body,
        title=Text(HISTORY_TITLE, style=theme.title),
        subtitle=Text(item_count(len(entries)), style=theme.info),
        title_align="left",
    )
