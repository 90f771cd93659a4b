"""Theme definitions for ClipKeeper display."""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme configuration.

    All styling in one place for easy customization.
    """
    # Status indicator glyph (stands in for the panel icon)
    indicator_icon: str = "⧉"

    # Text styles (Rich style strings)
    title: str = "bold"
    index: str = "cyan"
    preview: str = ""
    info: str = "dim"
    empty: str = "dim italic"
    notice: str = "green"
    error: str = "bold red"


DEFAULT_THEME = Theme()


def load_theme() -> Theme:
    """Load theme (currently returns default)."""
    return DEFAULT_THEME
