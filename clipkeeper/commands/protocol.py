"""Types for the command system.

Commands return structured output rather than printing, so the REPL and the
headless runner can each format results their own way.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clipkeeper.extension import ClipboardHistoryExtension


class CommandResult(Enum):
    """Result status of a command execution.

    Attributes:
        SUCCESS: Command completed successfully.
        ERROR: Command failed with an error.
        QUIT: User requested to quit the REPL.
    """

    SUCCESS = auto()
    ERROR = auto()
    QUIT = auto()


@dataclass
class CommandOutput:
    """Output from a command execution.

    Attributes:
        result: The result status of the command.
        message: Human-readable message (for display).
        data: Structured data (for rendering or further processing).
    """

    result: CommandResult
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> CommandOutput:
        """Create a successful output."""
        return cls(result=CommandResult.SUCCESS, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> CommandOutput:
        """Create an error output."""
        return cls(result=CommandResult.ERROR, message=message)

    @classmethod
    def quit(cls) -> CommandOutput:
        """Create a quit output."""
        return cls(result=CommandResult.QUIT)


@dataclass
class CommandContext:
    """What commands operate on.

    Attributes:
        extension: The running clipboard history session.
    """

    extension: ClipboardHistoryExtension
