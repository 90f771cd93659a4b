"""Startup wiring shared by the REPL and watch modes.

Sets up logging, loads configuration, and builds a ClipboardHistoryExtension
around the system clipboard.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from clipkeeper.clipboard.system import SystemClipboard
from clipkeeper.config.channel import SettingsStore
from clipkeeper.config.loader import load_config
from clipkeeper.config.schema import POLL_INTERVAL_KEY, Config
from clipkeeper.config.watch import ConfigFileWatcher
from clipkeeper.core.constants import get_default_config_path
from clipkeeper.core.errors import ClipboardUnavailableError
from clipkeeper.core.interfaces import ClipboardPort, IndicatorPort, Notifier
from clipkeeper.extension import ClipboardHistoryExtension

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    log_dir: Path,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> Path:
    """Configure file and console logging for the clipkeeper namespace.

    Logs are written to `{log_dir}/clipkeeper.log` with automatic rotation
    (max 5MB per file, 3 backup files). Reconfiguring replaces the handlers
    rather than stacking duplicates.

    Args:
        log_dir: Directory for clipkeeper.log. Created if doesn't exist.
        level: Logging level for file output (default INFO).
        console_level: Logging level for console output (default WARNING).

    Returns:
        Path to the log file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "clipkeeper.log"

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root_logger = logging.getLogger("clipkeeper")
    root_logger.setLevel(min(level, console_level))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

    logger.info("Logging configured: %s", log_file)
    return log_file


@dataclass
class Session:
    """Everything a front end needs to run.

    Attributes:
        extension: The clipboard history session (not yet enabled).
        settings: Live settings shared with the extension.
        config: Config as loaded at startup.
        config_watcher: Live-reload watcher, or None if disabled.
    """

    extension: ClipboardHistoryExtension
    settings: SettingsStore
    config: Config
    config_watcher: ConfigFileWatcher | None = None

    def start(self) -> None:
        """Enable history and start config following."""
        self.extension.enable()
        if self.config_watcher is not None:
            self.config_watcher.start()

    async def aclose(self) -> None:
        """Stop config following and disable history."""
        if self.config_watcher is not None:
            await self.config_watcher.aclose()
        await self.extension.aclose()


def resolve_watch_path(explicit: Path | None) -> Path | None:
    """Config file to follow: the explicit one, else the global one if present."""
    if explicit is not None:
        return explicit
    global_config = get_default_config_path()
    return global_config if global_config.is_file() else None


def build_session(
    config_path: Path | None = None,
    *,
    clipboard: ClipboardPort | None = None,
    indicator: IndicatorPort | None = None,
    notifier: Notifier | None = None,
    on_change: Callable[[str], None] | None = None,
    interval_ms: int | None = None,
    skip_initial: bool = False,
    live_reload: bool = True,
) -> Session:
    """Load config and assemble a Session.

    Raises:
        ConfigError: If configuration is invalid.
        ClipboardUnavailableError: If no clipboard was given and the system
            clipboard has no usable backend.
    """
    config = load_config(config_path)
    settings = SettingsStore.from_config(config)
    if interval_ms is not None:
        settings.set(POLL_INTERVAL_KEY, interval_ms)

    if clipboard is None:
        if not SystemClipboard.is_available():
            raise ClipboardUnavailableError(
                "access",
                "no clipboard mechanism found (on Linux install xclip, xsel or wl-clipboard)",
            )
        clipboard = SystemClipboard()

    extension = ClipboardHistoryExtension(
        clipboard,
        settings,
        indicator=indicator,
        notifier=notifier,
        on_change=on_change,
        skip_initial=skip_initial,
    )

    config_watcher = None
    if live_reload:
        watch_path = resolve_watch_path(config_path)
        if watch_path is not None:
            config_watcher = ConfigFileWatcher(watch_path, settings)
        else:
            logger.debug("No config file to follow, live reload off")

    return Session(
        extension=extension,
        settings=settings,
        config=config,
        config_watcher=config_watcher,
    )
