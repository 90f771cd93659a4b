"""Live reload of the config file into a SettingsStore.

Editing config.json while ClipKeeper runs takes effect without a restart:
the file's directory is watched with watchfiles, and on each change the file
is reloaded, validated, and pushed into the SettingsStore, whose subscribers
(history resize, indicator visibility) react as usual.

A file that fails to parse or validate is logged and ignored; the previous
settings stay in force until the file is fixed.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import watchfiles

from clipkeeper.config.channel import SettingsStore
from clipkeeper.config.loader import load_config
from clipkeeper.core.errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigFileWatcher:
    """Watches one config file and applies its contents on change."""

    def __init__(self, path: Path, settings: SettingsStore, debounce_ms: int = 400) -> None:
        """Initialize the watcher (does not start watching).

        Args:
            path: Config file to follow.
            settings: Store that receives reloaded values.
            debounce_ms: Quiet period before a burst of changes is reported.
        """
        self._path = path
        self._settings = settings
        self._debounce_ms = debounce_ms
        self._task: asyncio.Task[None] | None = None
        self._stop_event: asyncio.Event | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def reload(self) -> bool:
        """Reload the file once and apply it.

        Returns:
            True if the file was valid and applied (even if nothing changed).
        """
        try:
            config = load_config(self._path)
        except ConfigError as e:
            logger.warning("Ignoring config change, keeping previous settings: %s", e.message)
            return False
        changed = self._settings.apply(config.to_settings())
        if changed:
            logger.info("Config reloaded from %s, changed: %s", self._path, ", ".join(changed))
        else:
            logger.debug("Config reloaded from %s, no changes", self._path)
        return True

    def start(self) -> None:
        """Begin watching. No-op if already running."""
        if self.is_running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.get_running_loop().create_task(
            self._run(self._stop_event), name="clipkeeper-config-watcher"
        )

    def stop(self) -> None:
        """Stop watching. Safe to call when not running."""
        if self._stop_event is not None:
            self._stop_event.set()
        task, self._task = self._task, None
        if task is not None:
            task.cancel()

    async def aclose(self) -> None:
        """Stop and wait for the watch task to finish."""
        task = self._task
        self.stop()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    def _matches(self, change: watchfiles.Change, path: str) -> bool:
        # Editors often save by replace-and-rename, so the directory is watched
        # and events are filtered down to the file. A symlinked config is
        # matched by its target's name.
        target = self._path.resolve()
        return change != watchfiles.Change.deleted and Path(path).name == target.name

    async def _run(self, stop_event: asyncio.Event) -> None:
        directory = self._path.resolve().parent
        if not directory.is_dir():
            logger.warning("Config directory %s does not exist, live reload disabled", directory)
            return
        logger.info("Watching %s for config changes", self._path)
        async for _changes in watchfiles.awatch(
            directory,
            watch_filter=self._matches,
            debounce=self._debounce_ms,
            stop_event=stop_event,
            recursive=False,
        ):
            self.reload()
