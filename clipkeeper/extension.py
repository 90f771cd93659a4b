"""ClipboardHistoryExtension - the owned context object for one watching session.

Wires the clipboard, the history store, the watcher and the config channel
together, and exposes the narrow contract presentation layers use:
get_snapshot(), get_entries(), select_entry() and clear_history().

Lifecycle:
    extension = ClipboardHistoryExtension(SystemClipboard(), settings, indicator)
    extension.enable()        # fresh empty store, watcher running
    ...
    extension.disable()       # watcher stopped, subscriptions revoked, store dropped
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from clipkeeper.clipboard.watcher import ClipboardWatcher, WatcherHealth
from clipkeeper.config.channel import ConfigChannel, SettingsStore
from clipkeeper.core.constants import APP_TITLE, DEFAULT_READ_TIMEOUT
from clipkeeper.core.errors import ExtensionNotEnabledError
from clipkeeper.core.interfaces import ClipboardPort, IndicatorPort, Notifier
from clipkeeper.history.store import HistoryStore
from clipkeeper.history.types import HistoryEntry

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Text copied to clipboard"


class ClipboardHistoryExtension:
    """Clipboard history session with an explicit enable/disable lifecycle."""

    def __init__(
        self,
        clipboard: ClipboardPort,
        settings: SettingsStore,
        indicator: IndicatorPort | None = None,
        notifier: Notifier | None = None,
        *,
        on_change: Callable[[str], None] | None = None,
        skip_initial: bool = False,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ) -> None:
        """Initialize (disabled).

        Args:
            clipboard: Clipboard to watch and write selections to.
            settings: Live settings source.
            indicator: Optional status indicator toggled by enable-panel-icon.
            notifier: Optional sink for "copied" notifications.
            on_change: Optional callback for each newly recorded text.
            skip_initial: Treat the clipboard content present at enable() as
                already seen instead of recording it.
            read_timeout: Seconds before a clipboard read counts as failed.
        """
        self._clipboard = clipboard
        self._settings = settings
        self._indicator = indicator
        self._notifier = notifier
        self._on_change = on_change
        self._skip_initial = skip_initial
        self._read_timeout = read_timeout

        self._store: HistoryStore | None = None
        self._watcher: ClipboardWatcher | None = None
        self._channel: ConfigChannel | None = None

    @property
    def is_enabled(self) -> bool:
        return self._store is not None

    @property
    def settings(self) -> SettingsStore:
        return self._settings

    @property
    def store(self) -> HistoryStore | None:
        """Current session's store, or None while disabled."""
        return self._store

    @property
    def watcher(self) -> ClipboardWatcher | None:
        return self._watcher

    @property
    def health(self) -> WatcherHealth | None:
        """Watcher diagnostics, or None while disabled."""
        return self._watcher.health if self._watcher is not None else None

    def enable(self) -> None:
        """Start a watching session. No-op if already enabled.

        Must be called with a running event loop.
        """
        if self.is_enabled:
            return

        channel = ConfigChannel(self._settings)
        store = HistoryStore(channel.current_capacity())
        watcher = ClipboardWatcher(
            self._clipboard,
            store,
            on_change=self._on_change,
            read_timeout=self._read_timeout,
            skip_initial=self._skip_initial,
        )

        channel.on_capacity_changed(store.resize)
        channel.on_enabled_changed(self._set_indicator_visible)
        try:
            watcher.start(channel.current_poll_interval_ms())
        except Exception:
            channel.teardown()
            raise

        self._channel = channel
        self._store = store
        self._watcher = watcher
        self._set_indicator_visible(channel.current_enabled())
        logger.info("Clipboard history enabled (capacity %d)", store.capacity)

    def disable(self) -> None:
        """End the session. Safe to call when not enabled."""
        if self._watcher is not None:
            self._watcher.stop()
        if self._channel is not None:
            self._channel.teardown()
        was_enabled = self.is_enabled
        self._store = None
        self._watcher = None
        self._channel = None
        if was_enabled:
            self._set_indicator_visible(False)
            logger.info("Clipboard history disabled")

    async def aclose(self) -> None:
        """Disable and wait for the watcher task to unwind."""
        watcher = self._watcher
        self.disable()
        if watcher is not None:
            await watcher.aclose()

    # --- Presenter contract ---

    def get_snapshot(self) -> tuple[str, ...]:
        """History texts, most recent first. Empty while disabled."""
        if self._store is None:
            return ()
        return self._store.snapshot()

    def get_entries(self) -> tuple[HistoryEntry, ...]:
        """History entries with display metadata. Empty while disabled."""
        if self._store is None:
            return ()
        return self._store.entries()

    async def select_entry(self, text: str) -> None:
        """Put text back on the clipboard.

        The watcher sees the write on its next tick and moves the entry to
        the front, the same as any other copy.

        Raises:
            ExtensionNotEnabledError: If called while disabled.
            ClipboardUnavailableError: If the clipboard can't be written.
        """
        if self._store is None:
            raise ExtensionNotEnabledError("select entry")
        await self._clipboard.write_text(text)
        logger.debug("Selected history entry (%d characters)", len(text))
        if self._notifier is not None:
            try:
                self._notifier(APP_TITLE, COPIED_MESSAGE)
            except Exception:
                logger.exception("Notifier failed")

    def clear_history(self) -> None:
        """Remove all history entries.

        Raises:
            ExtensionNotEnabledError: If called while disabled.
        """
        if self._store is None:
            raise ExtensionNotEnabledError("clear history")
        self._store.clear()
        logger.info("Clipboard history cleared")

    def _set_indicator_visible(self, visible: bool) -> None:
        if self._indicator is None:
            return
        try:
            self._indicator.set_visible(visible)
        except Exception:
            logger.exception("Indicator visibility update failed")
