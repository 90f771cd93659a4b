"""Typed exception hierarchy for ClipKeeper."""

from __future__ import annotations


class ClipkeeperError(Exception):
    """Base class for all ClipKeeper errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(ClipkeeperError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class ClipboardUnavailableError(ClipkeeperError):
    """Raised when no clipboard backend is usable or a read/write fails."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Clipboard {operation} failed: {reason}")


class ExtensionNotEnabledError(ClipkeeperError):
    """Raised when a presenter call reaches a disabled extension."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: clipboard history is not enabled")
