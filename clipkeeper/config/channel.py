"""Reactive settings and the channel that feeds them into the history core.

SettingsStore is the live, editable settings source: a small key/value map
whose subscribers are told about every change. ConfigChannel sits between it
and the history core. It validates and clamps what comes out, and remembers
every subscription it created so one teardown() call revokes them all.

Example:
    settings = SettingsStore.from_config(load_config())
    channel = ConfigChannel(settings)

    store = HistoryStore(channel.current_capacity())
    channel.on_capacity_changed(store.resize)

    settings.set("history-size", 3)   # store.resize(3)
    channel.teardown()                 # no further callbacks
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from clipkeeper.config.schema import (
    ENABLE_PANEL_ICON_KEY,
    HISTORY_SIZE_KEY,
    POLL_INTERVAL_KEY,
    PREVIEW_LENGTH_KEY,
    Config,
)
from clipkeeper.core.constants import DEFAULT_HISTORY_SIZE

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = Config().to_settings()

_ids = itertools.count(1)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Opaque token returned by on_change(), passed back to unsubscribe()."""

    id: int
    key: str


class SettingsStore:
    """Key/value settings with change subscriptions.

    Only keys known to the Config schema are accepted. Callbacks run
    synchronously, in registration order, and only when a value actually
    changes. A failing callback is logged and does not stop the others.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(DEFAULT_SETTINGS)
        # key -> (handle id -> callback)
        self._subscribers: dict[str, dict[int, Callable[[Any], None]]] = defaultdict(dict)
        if values:
            for key, value in values.items():
                self._check_key(key)
                self._values[key] = value

    @classmethod
    def from_config(cls, config: Config) -> SettingsStore:
        """Create a store seeded from a validated Config."""
        return cls(config.to_settings())

    def _check_key(self, key: str) -> None:
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key!r}")

    def get(self, key: str) -> Any:
        """Current raw value.

        Raises:
            KeyError: If key is not a known setting.
        """
        self._check_key(key)
        return self._values[key]

    def get_int(self, key: str) -> int:
        """Current value as an integer.

        Raises:
            KeyError: If key is not a known setting.
            TypeError: If the stored value is not an integer.
        """
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Setting {key!r} is not an integer: {value!r}")
        return value

    def get_bool(self, key: str) -> bool:
        """Current value as a boolean.

        Raises:
            KeyError: If key is not a known setting.
            TypeError: If the stored value is not a boolean.
        """
        value = self.get(key)
        if not isinstance(value, bool):
            raise TypeError(f"Setting {key!r} is not a boolean: {value!r}")
        return value

    def set(self, key: str, value: Any) -> bool:
        """Set a value and notify subscribers if it changed.

        Returns:
            True if the value changed.

        Raises:
            KeyError: If key is not a known setting.
        """
        self._check_key(key)
        old = self._values[key]
        if type(old) is type(value) and old == value:
            return False
        self._values[key] = value
        logger.debug("Setting %s changed: %r -> %r", key, old, value)
        self._notify(key, value)
        return True

    def apply(self, values: Mapping[str, Any]) -> list[str]:
        """Set several values, notifying per changed key.

        Returns:
            Keys whose values changed.
        """
        for key in values:
            self._check_key(key)
        return [key for key, value in values.items() if self.set(key, value)]

    def on_change(self, key: str, callback: Callable[[Any], None]) -> SubscriptionHandle:
        """Register callback(new_value) for changes to key.

        Raises:
            KeyError: If key is not a known setting.
        """
        self._check_key(key)
        handle = SubscriptionHandle(id=next(_ids), key=key)
        self._subscribers[key][handle.id] = callback
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Revoke a subscription. Safe to call with a stale handle."""
        subs = self._subscribers.get(handle.key)
        if subs is None:
            return
        subs.pop(handle.id, None)
        if not subs:
            del self._subscribers[handle.key]

    def subscriber_count(self, key: str | None = None) -> int:
        """Count live subscriptions for one key, or across all keys."""
        if key is not None:
            subs = self._subscribers.get(key)
            return len(subs) if subs else 0
        return sum(len(subs) for subs in self._subscribers.values())

    def _notify(self, key: str, value: Any) -> None:
        subs = self._subscribers.get(key)
        if not subs:
            return
        for callback in list(subs.values()):
            try:
                callback(value)
            except Exception:
                logger.exception("Settings callback for %s failed", key)


def coerce_capacity(value: Any) -> int | None:
    """Clamp a raw history-size value to a valid capacity.

    Returns:
        max(1, int(value)), or None if value isn't an integer.
    """
    if isinstance(value, bool):
        return None
    try:
        capacity = int(value)
    except (TypeError, ValueError):
        return None
    if isinstance(value, float) and value != capacity:
        return None
    if capacity < 1:
        logger.warning("%s %r is below 1, clamping to 1", HISTORY_SIZE_KEY, value)
        return 1
    return capacity


class ConfigChannel:
    """Bridges SettingsStore into the history core's runtime parameters."""

    def __init__(self, settings: SettingsStore) -> None:
        self._settings = settings
        self._handles: list[SubscriptionHandle] = []

    @property
    def settings(self) -> SettingsStore:
        return self._settings

    @property
    def subscription_count(self) -> int:
        """Subscriptions created through this channel and not yet torn down."""
        return len(self._handles)

    def current_capacity(self) -> int:
        """History capacity to use right now (always >= 1)."""
        value = self._settings.get(HISTORY_SIZE_KEY)
        capacity = coerce_capacity(value)
        if capacity is None:
            logger.warning(
                "Invalid %s %r, using default %d", HISTORY_SIZE_KEY, value, DEFAULT_HISTORY_SIZE
            )
            return DEFAULT_HISTORY_SIZE
        return capacity

    def current_enabled(self) -> bool:
        """Whether the status indicator should be shown."""
        return bool(self._settings.get(ENABLE_PANEL_ICON_KEY))

    def current_poll_interval_ms(self) -> int:
        return self._settings.get_int(POLL_INTERVAL_KEY)

    def current_preview_length(self) -> int:
        return self._settings.get_int(PREVIEW_LENGTH_KEY)

    def on_capacity_changed(self, callback: Callable[[int], None]) -> SubscriptionHandle:
        """Call callback(capacity) whenever history-size changes.

        The value is clamped to >= 1 first; non-integer values are logged and
        dropped so the callback never sees them.
        """

        def relay(value: Any) -> None:
            capacity = coerce_capacity(value)
            if capacity is None:
                logger.warning("Ignoring invalid %s: %r", HISTORY_SIZE_KEY, value)
                return
            callback(capacity)

        return self._track(self._settings.on_change(HISTORY_SIZE_KEY, relay))

    def on_enabled_changed(self, callback: Callable[[bool], None]) -> SubscriptionHandle:
        """Call callback(visible) whenever enable-panel-icon changes."""

        def relay(value: Any) -> None:
            callback(bool(value))

        return self._track(self._settings.on_change(ENABLE_PANEL_ICON_KEY, relay))

    def teardown(self) -> None:
        """Revoke every subscription registered through this channel."""
        handles, self._handles = self._handles, []
        for handle in handles:
            self._settings.unsubscribe(handle)
        if handles:
            logger.debug("Config channel revoked %d subscriptions", len(handles))

    def _track(self, handle: SubscriptionHandle) -> SubscriptionHandle:
        self._handles.append(handle)
        return handle
