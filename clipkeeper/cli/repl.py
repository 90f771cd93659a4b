"""Interactive history browser.

A prompt_toolkit prompt with a bottom toolbar showing the indicator and the
entry count, refreshed while the watcher records new copies in the
background. The user lists, picks and clears entries with short commands
(see clipkeeper.commands.core).
"""

from __future__ import annotations

import logging
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.styles import Style

from clipkeeper.cli.bootstrap import build_session
from clipkeeper.cli.output import print_output
from clipkeeper.commands.core import execute_command
from clipkeeper.commands.protocol import CommandContext, CommandResult
from clipkeeper.config.schema import PREVIEW_LENGTH_KEY
from clipkeeper.core.constants import HISTORY_TITLE
from clipkeeper.display.console import get_console
from clipkeeper.display.indicator import ConsoleNotifier, TerminalIndicator

logger = logging.getLogger(__name__)


async def run_repl(
    config_path: Path | None = None,
    interval_ms: int | None = None,
    skip_initial: bool = False,
    live_reload: bool = True,
) -> None:
    """Run the interactive REPL until the user quits."""
    console = get_console()
    indicator = TerminalIndicator()
    session = build_session(
        config_path,
        indicator=indicator,
        notifier=ConsoleNotifier(console),
        interval_ms=interval_ms,
        skip_initial=skip_initial,
        live_reload=live_reload,
    )
    extension = session.extension
    settings = session.settings
    ctx = CommandContext(extension=extension)

    def get_toolbar() -> HTML:
        count = len(extension.get_snapshot())
        health = extension.health
        status = (
            '<style fg="ansigreen">● watching</style>'
            if health is None or health.is_healthy
            else '<style fg="ansired">● clipboard unreadable</style>'
        )
        return HTML(f"{indicator.toolbar_text(count)}  {status}")

    prompt_style = Style.from_dict({
        "bottom-toolbar": "noreverse",
    })
    prompt_session: PromptSession[str] = PromptSession(
        bottom_toolbar=get_toolbar,
        style=prompt_style,
        refresh_interval=0.5,
    )

    console.print(f"[bold]{HISTORY_TITLE}[/] - copy text anywhere, type [cyan]help[/] for commands")
    session.start()
    try:
        while True:
            try:
                user_input = await prompt_session.prompt_async("clip> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

            if not user_input.strip():
                continue

            output = await execute_command(ctx, user_input)
            if output.result == CommandResult.QUIT:
                break
            print_output(console, output, settings.get_int(PREVIEW_LENGTH_KEY))
    finally:
        await session.aclose()
