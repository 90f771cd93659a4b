"""REPL commands operating on a ClipboardHistoryExtension."""

from clipkeeper.commands.core import (
    HELP_TEXT,
    cmd_clear,
    cmd_icon,
    cmd_list,
    cmd_pick,
    cmd_size,
    cmd_status,
    execute_command,
)
from clipkeeper.commands.protocol import CommandContext, CommandOutput, CommandResult

__all__ = [
    "CommandContext",
    "CommandOutput",
    "CommandResult",
    "HELP_TEXT",
    "cmd_clear",
    "cmd_icon",
    "cmd_list",
    "cmd_pick",
    "cmd_size",
    "cmd_status",
    "execute_command",
]
