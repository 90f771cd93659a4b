"""Headless watch mode: record and print clipboard changes until interrupted."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from clipkeeper.cli.bootstrap import build_session
from clipkeeper.config.channel import SettingsStore
from clipkeeper.config.schema import PREVIEW_LENGTH_KEY
from clipkeeper.core.constants import DEFAULT_PREVIEW_LENGTH
from clipkeeper.core.text_safety import one_line, sanitize_for_display
from clipkeeper.display.console import get_console
from clipkeeper.history.types import HistoryEntry

logger = logging.getLogger(__name__)


class EntryPrinter:
    """on_change callback that prints each captured entry with a timestamp.

    The preview length is read from settings at print time, so config edits
    apply without a restart.
    """

    def __init__(self, console: Console, settings: SettingsStore | None = None) -> None:
        self.console = console
        self.settings = settings

    def preview_length(self) -> int:
        if self.settings is None:
            return DEFAULT_PREVIEW_LENGTH
        return self.settings.get_int(PREVIEW_LENGTH_KEY)

    def __call__(self, text: str) -> None:
        preview = HistoryEntry(text=text).preview(self.preview_length())
        stamp = datetime.now().strftime("%H:%M:%S")
        self.console.print(f"[dim]{stamp}[/] {sanitize_for_display(one_line(preview))}")
        logger.info("Captured %d characters", len(text))


async def run_watch(
    config_path: Path | None = None,
    interval_ms: int | None = None,
    skip_initial: bool = False,
    live_reload: bool = True,
) -> None:
    """Watch the clipboard and print each new entry. Runs until cancelled."""
    console = get_console()
    printer = EntryPrinter(console)
    session = build_session(
        config_path,
        on_change=printer,
        interval_ms=interval_ms,
        skip_initial=skip_initial,
        live_reload=live_reload,
    )
    printer.settings = session.settings

    console.print("Watching clipboard. Press Ctrl+C to stop.", style="dim")
    session.start()
    try:
        await asyncio.Event().wait()
    finally:
        count = len(session.extension.get_snapshot())
        await session.aclose()
        console.print(f"Stopped. {count} entries were in history.", style="dim")
