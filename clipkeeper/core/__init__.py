"""Core constants, errors and helpers."""

from clipkeeper.core.errors import (
    ClipboardUnavailableError,
    ClipkeeperError,
    ConfigError,
    ExtensionNotEnabledError,
)

__all__ = [
    "ClipkeeperError",
    "ConfigError",
    "ClipboardUnavailableError",
    "ExtensionNotEnabledError",
]
