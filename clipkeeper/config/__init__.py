"""Configuration loading, validation and live settings."""

from clipkeeper.config.channel import ConfigChannel, SettingsStore, SubscriptionHandle
from clipkeeper.config.loader import DEFAULT_CONFIG, DEFAULTS_DIR, load_config
from clipkeeper.config.schema import (
    ENABLE_PANEL_ICON_KEY,
    HISTORY_SIZE_KEY,
    POLL_INTERVAL_KEY,
    PREVIEW_LENGTH_KEY,
    Config,
)
from clipkeeper.config.watch import ConfigFileWatcher

__all__ = [
    "Config",
    "ConfigChannel",
    "ConfigFileWatcher",
    "DEFAULT_CONFIG",
    "DEFAULTS_DIR",
    "ENABLE_PANEL_ICON_KEY",
    "HISTORY_SIZE_KEY",
    "POLL_INTERVAL_KEY",
    "PREVIEW_LENGTH_KEY",
    "SettingsStore",
    "SubscriptionHandle",
    "load_config",
]
