"""Sanitization for clipboard text shown in the terminal.

Clipboard contents come from whatever the user (or any other program) copied,
so they are untrusted. Before a history entry is rendered, escape sequences
and control characters are stripped and Rich markup is escaped.

Usage:
    from clipkeeper.core.text_safety import sanitize_for_display

    console.print(sanitize_for_display(entry.preview()))
"""

import re

from rich.markup import escape as rich_escape

# CSI (colors, cursor), mode changes, OSC (title, clipboard), DCS/SOS/PM/APC
ANSI_ESCAPE_PATTERN = re.compile(
    r'\x1b\[[0-9;]*[ABCDEFGHJKSTfmnsu]|'
    r'\x1b\[\?[0-9;]*[hl]|'
    r'\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)|'
    r'\x1b[PX^_][^\x1b]*\x1b\\'
)

# C0 controls except \t \n \r, plus DEL
CONTROL_CHAR_PATTERN = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def strip_terminal_escapes(text: str) -> str:
    """Remove ANSI escape sequences and dangerous control characters.

    Examples:
        >>> strip_terminal_escapes("\\x1b[31mRed\\x1b[0m")
        'Red'
        >>> strip_terminal_escapes("Hello\\x00World")
        'HelloWorld'
    """
    text = ANSI_ESCAPE_PATTERN.sub('', text)
    text = CONTROL_CHAR_PATTERN.sub('', text)
    return text


def sanitize_for_display(text: str) -> str:
    """Strip terminal escapes, then escape Rich markup.

    Examples:
        >>> sanitize_for_display("\\x1b[31m[red]attack[/red]\\x1b[0m")
        '\\\\[red]attack\\\\[/red]'
    """
    return rich_escape(strip_terminal_escapes(text))


def one_line(text: str) -> str:
    """Collapse line breaks and tabs so a preview fits a single table row."""
    return " ".join(text.split())
