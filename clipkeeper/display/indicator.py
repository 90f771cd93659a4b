"""Terminal stand-ins for the panel indicator and desktop notifications."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from clipkeeper.display.console import get_console
from clipkeeper.display.history_view import item_count
from clipkeeper.display.theme import Theme, load_theme


class TerminalIndicator:
    """Status indicator shown in the REPL toolbar.

    Implements IndicatorPort: set_visible() flips whether toolbar_text()
    includes the icon. Monitoring is unaffected either way.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme or load_theme()
        self.visible = False

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def toolbar_text(self, count: int) -> str:
        """Plain text for the bottom toolbar, e.g. '⧉ 3 items'."""
        label = item_count(count)
        if not self.visible:
            return label
        return f"{self.theme.indicator_icon} {label}"


class ConsoleNotifier:
    """Prints notifications to the console (implements Notifier)."""

    def __init__(self, console: Console | None = None, theme: Theme | None = None) -> None:
        self.console = console or get_console()
        self.theme = theme or load_theme()

    def __call__(self, title: str, body: str) -> None:
        line = Text()
        line.append(f"{title}: ", style="bold")
        line.append(body, style=self.theme.notice)
        self.console.print(line)
