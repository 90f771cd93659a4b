"""Tests for help text completeness.

These tests ensure that:
1. HELP_TEXT lists every command execute_command dispatches
2. Every command in HELP_TEXT is accepted (no orphans)
"""

import re

import pytest

from clipkeeper.commands import HELP_TEXT, CommandContext, CommandResult, execute_command
from clipkeeper.extension import ClipboardHistoryExtension

IMPLEMENTED_COMMANDS = {"list", "pick", "clear", "size", "icon", "status", "help", "quit"}


def help_commands() -> set[str]:
    return set(re.findall(r"^  (\w+)", HELP_TEXT, flags=re.MULTILINE))


class TestHelpCompleteness:
    """Tests for HELP_TEXT against the dispatcher."""

    def test_all_commands_documented(self):
        assert help_commands() == IMPLEMENTED_COMMANDS

    @pytest.mark.asyncio
    async def test_documented_commands_are_known(self, memory_clipboard, settings):
        """No documented command falls through to 'Unknown command'."""
        ctx = CommandContext(extension=ClipboardHistoryExtension(memory_clipboard, settings))
        for name in sorted(help_commands()):
            output = await execute_command(ctx, name)
            assert not (output.message or "").startswith("Unknown command"), name
            if name == "quit":
                assert output.result == CommandResult.QUIT
