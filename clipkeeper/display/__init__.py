"""ClipKeeper display: console, history rendering, indicator and notifications."""

from clipkeeper.display.console import get_console, set_console
from clipkeeper.display.history_view import EMPTY_MESSAGE, format_entry_preview, render_history
from clipkeeper.display.indicator import ConsoleNotifier, TerminalIndicator
from clipkeeper.display.theme import Theme, load_theme

__all__ = [
    "ConsoleNotifier",
    "EMPTY_MESSAGE",
    "TerminalIndicator",
    "Theme",
    "format_entry_preview",
    "get_console",
    "load_theme",
    "render_history",
    "set_console",
]
