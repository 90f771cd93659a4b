"""Core constants and paths for ClipKeeper.

Single source of truth for global paths and timing defaults. Modules import
from here instead of hardcoding `Path.home() / ".clipkeeper"` or poll intervals.
"""

import os
from pathlib import Path

CLIPKEEPER_DIR_NAME = ".clipkeeper"
CLIPKEEPER_HOME_ENV = "CLIPKEEPER_HOME"

# Clipboard sampling period for the watcher loop
DEFAULT_POLL_INTERVAL_MS = 500

# A single clipboard read longer than this counts as a failed tick
DEFAULT_READ_TIMEOUT = 2.0

# Consecutive failed reads before the watcher escalates from DEBUG to WARNING
FAILURE_WARN_THRESHOLD = 10

DEFAULT_HISTORY_SIZE = 10
DEFAULT_PREVIEW_LENGTH = 100

# Title used for desktop-style notifications and the history panel
APP_TITLE = "Clipboard Manager"
HISTORY_TITLE = "Clipboard History"


def get_clipkeeper_dir() -> Path:
    """Get the global config directory (~/.clipkeeper, or $CLIPKEEPER_HOME)."""
    override = os.environ.get(CLIPKEEPER_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CLIPKEEPER_DIR_NAME


def get_defaults_dir() -> Path:
    """Get package defaults directory (shipped with package)."""
    import clipkeeper
    return Path(clipkeeper.__file__).parent / "defaults"


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_clipkeeper_dir() / "config.json"


def get_log_dir() -> Path:
    """Get default log directory."""
    return get_clipkeeper_dir() / "logs"
