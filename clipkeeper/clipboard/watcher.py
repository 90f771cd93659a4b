"""Clipboard change detection by periodic sampling.

The watcher owns one asyncio task that reads the clipboard every interval and
forwards genuinely new text into a HistoryStore. Empty reads, whitespace-only
reads and repeats of the last observed value are noise and are ignored.

Architecture:
    - Exactly one sampling task while running (start() is idempotent)
    - Ticks are serialized, manual tick() calls included: a read is never
      issued before the previous one has resolved or timed out
    - A generation counter is bumped on every stop(); a read that completes
      under an old generation is discarded without touching the store
    - Failures never escape a tick; they are recorded in WatcherHealth

Example:
    store = HistoryStore(capacity=10)
    watcher = ClipboardWatcher(SystemClipboard(), store)
    watcher.start(interval_ms=500)
    ...
    await watcher.aclose()
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from clipkeeper.core.constants import (
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_READ_TIMEOUT,
    FAILURE_WARN_THRESHOLD,
)
from clipkeeper.core.interfaces import ClipboardPort
from clipkeeper.core.utils import is_blank
from clipkeeper.history.store import HistoryStore

logger = logging.getLogger(__name__)


@dataclass
class WatcherHealth:
    """Diagnostics for the sampling loop.

    Attributes:
        ticks: Total ticks attempted.
        last_success_at: Unix time of the last successful clipboard read.
        last_change_at: Unix time the last new value was recorded.
        last_error: Message from the most recent failed read.
        consecutive_failures: Failed reads since the last success.
    """

    ticks: int = 0
    last_success_at: float | None = None
    last_change_at: float | None = None
    last_error: str | None = None
    consecutive_failures: int = 0

    @property
    def is_healthy(self) -> bool:
        """False once reads have failed FAILURE_WARN_THRESHOLD times in a row."""
        return self.consecutive_failures < FAILURE_WARN_THRESHOLD


class ClipboardWatcher:
    """Samples a ClipboardPort and relays new text into a HistoryStore.

    Whatever is on the clipboard when start() runs is recorded by the first
    tick, like any other new value. With skip_initial the first successful
    read is a baseline instead: remembered as last-observed, not recorded.

    Attributes:
        health: Running diagnostics, see WatcherHealth.
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        store: HistoryStore,
        on_change: Callable[[str], None] | None = None,
        *,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        skip_initial: bool = False,
    ) -> None:
        """Initialize the watcher (does not start sampling).

        Args:
            clipboard: Clipboard to sample.
            store: Store receiving new values.
            on_change: Optional callback invoked with each newly recorded text.
            read_timeout: Seconds before a single read counts as failed.
            skip_initial: Treat the content present at start time as a
                baseline and don't record it.
        """
        self._clipboard = clipboard
        self._store = store
        self._on_change = on_change
        self._read_timeout = read_timeout
        self._skip_initial = skip_initial

        self._task: asyncio.Task[None] | None = None
        self._running = False
        self._generation = 0
        self._interval_ms = DEFAULT_POLL_INTERVAL_MS

        # WatcherState
        self._last_observed_text: str | None = None
        self._primed = not skip_initial
        self._tick_lock = asyncio.Lock()

        self.health = WatcherHealth()

    @property
    def is_running(self) -> bool:
        """Check if the sampling task is active."""
        return self._running

    @property
    def interval_ms(self) -> int:
        """Sampling period of the current (or last) run."""
        return self._interval_ms

    @property
    def last_observed_text(self) -> str | None:
        """Most recent non-blank text read from the clipboard."""
        return self._last_observed_text

    def start(self, interval_ms: int = DEFAULT_POLL_INTERVAL_MS) -> None:
        """Begin periodic sampling. No-op if already running.

        Must be called with a running event loop.

        Args:
            interval_ms: Milliseconds between ticks.

        Raises:
            ValueError: If interval_ms is not positive.
            RuntimeError: If there is no running event loop.
        """
        if self._running:
            return
        if interval_ms <= 0:
            raise ValueError(f"Poll interval must be positive, got {interval_ms}")

        loop = asyncio.get_running_loop()
        self._running = True
        self._interval_ms = interval_ms
        self._last_observed_text = None
        self._primed = not self._skip_initial
        self._generation += 1
        self._task = loop.create_task(
            self._run(self._generation), name="clipkeeper-watcher"
        )
        logger.info("Clipboard watcher started (interval %d ms)", interval_ms)

    def stop(self) -> None:
        """Cancel sampling. Safe to call when not running.

        After return no read issued by this watcher can reach the store.
        """
        self._generation += 1
        self._last_observed_text = None
        if not self._running:
            return
        self._running = False
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
        logger.info("Clipboard watcher stopped")

    async def aclose(self) -> None:
        """Stop and wait for the sampling task to finish unwinding."""
        task = self._task
        self.stop()
        if task is not None and task is not asyncio.current_task():
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def tick(self) -> bool:
        """Run one sampling step outside the periodic loop.

        Waits for any tick already in flight, so reads never overlap.

        Returns:
            True if a new value was recorded.
        """
        return await self._tick(self._generation)

    async def _run(self, generation: int) -> None:
        interval = self._interval_ms / 1000
        while True:
            await self._tick(generation)
            await asyncio.sleep(interval)

    async def _tick(self, generation: int) -> bool:
        async with self._tick_lock:
            return await self._tick_locked(generation)

    async def _tick_locked(self, generation: int) -> bool:
        if generation != self._generation:
            return False
        self.health.ticks += 1
        try:
            text = await asyncio.wait_for(
                self._clipboard.read_text(), timeout=self._read_timeout
            )
        except asyncio.TimeoutError:
            self._record_failure(f"read timed out after {self._read_timeout}s")
            return False
        except Exception as e:
            self._record_failure(str(e) or type(e).__name__)
            return False

        if generation != self._generation:
            logger.debug("Discarding clipboard read that completed after stop")
            return False

        self._record_success()

        if not self._primed:
            self._primed = True
            if not is_blank(text):
                self._last_observed_text = text
            return False

        if is_blank(text) or text == self._last_observed_text:
            return False

        self._last_observed_text = text
        self._store.add(text)
        self.health.last_change_at = time.time()
        logger.debug("Recorded clipboard change (%d characters)", len(text))

        if self._on_change is not None:
            try:
                self._on_change(text)
            except Exception:
                logger.exception("Clipboard change callback failed")
        return True

    def _record_success(self) -> None:
        health = self.health
        if health.consecutive_failures >= FAILURE_WARN_THRESHOLD:
            logger.info(
                "Clipboard reads recovered after %d failures", health.consecutive_failures
            )
        health.consecutive_failures = 0
        health.last_success_at = time.time()

    def _record_failure(self, reason: str) -> None:
        health = self.health
        health.consecutive_failures += 1
        health.last_error = reason
        if health.consecutive_failures == FAILURE_WARN_THRESHOLD:
            logger.warning(
                "Clipboard unreadable for %d consecutive ticks: %s",
                health.consecutive_failures,
                reason,
            )
        else:
            logger.debug("Clipboard read failed: %s", reason)
