"""Pydantic models for ClipKeeper configuration validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from clipkeeper.core.constants import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_PREVIEW_LENGTH,
)

# Settings keys as they appear in config.json and in the live settings store
HISTORY_SIZE_KEY = "history-size"
ENABLE_PANEL_ICON_KEY = "enable-panel-icon"
POLL_INTERVAL_KEY = "poll-interval-ms"
PREVIEW_LENGTH_KEY = "preview-length"


class Config(BaseModel):
    """Root configuration.

    Example config.json:
        {
            "history-size": 25,
            "enable-panel-icon": false
        }
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    history_size: int = Field(default=DEFAULT_HISTORY_SIZE, ge=1, alias=HISTORY_SIZE_KEY)
    """Maximum number of distinct entries kept in history."""

    enable_panel_icon: bool = Field(default=True, alias=ENABLE_PANEL_ICON_KEY)
    """Show the status indicator. Clipboard monitoring runs either way."""

    poll_interval_ms: int = Field(
        default=DEFAULT_POLL_INTERVAL_MS, ge=50, alias=POLL_INTERVAL_KEY
    )
    """Clipboard sampling period. Read once when history is enabled."""

    preview_length: int = Field(
        default=DEFAULT_PREVIEW_LENGTH, ge=10, alias=PREVIEW_LENGTH_KEY
    )
    """Characters of each entry shown before truncating with '...'."""

    def to_settings(self) -> dict[str, Any]:
        """Flatten to the dashed-key mapping used by SettingsStore."""
        return self.model_dump(by_alias=True)
