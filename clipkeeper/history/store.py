"""HistoryStore - bounded, deduplicated, most-recent-first text history."""
from __future__ import annotations

import logging
from collections.abc import Iterator

from clipkeeper.core.constants import DEFAULT_HISTORY_SIZE
from clipkeeper.core.utils import is_blank
from clipkeeper.history.types import HistoryEntry

logger = logging.getLogger(__name__)


class HistoryStore:
    """In-memory most-recently-used list with uniqueness.

    Invariants:
        - No two entries have equal text (exact string comparison).
        - len(store) <= capacity at all times.
        - Position 0 is the most recently added entry.

    Every mutation builds the new entry list first and swaps it in with a
    single assignment, so a reader never observes a half-truncated store.

    Example:
        store = HistoryStore(capacity=3)
        store.add("a")
        store.add("b")
        store.add("a")
        store.snapshot()  # ("a", "b")
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        """Initialize an empty store.

        Args:
            capacity: Maximum number of entries retained. Must be >= 1.

        Raises:
            ValueError: If capacity < 1.
        """
        self._check_capacity(capacity)
        self._capacity = capacity
        self._entries: tuple[HistoryEntry, ...] = ()

    @staticmethod
    def _check_capacity(capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"Capacity must be an integer, got {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"Capacity must be >= 1, got {capacity}")

    @property
    def capacity(self) -> int:
        """Maximum number of entries retained."""
        return self._capacity

    def add(self, text: str) -> None:
        """Record text as the most recent entry.

        An existing entry with equal text is moved to the front rather than
        duplicated. Entries beyond capacity are dropped from the tail. The
        text is stored verbatim; callers filter blank text before calling.

        Args:
            text: Clipboard text, non-blank.

        Raises:
            ValueError: If text is empty or whitespace-only.
        """
        if is_blank(text):
            raise ValueError("Cannot add blank text to history")

        kept = [entry for entry in self._entries if entry.text != text]
        kept.insert(0, HistoryEntry.from_text(text))
        self._entries = tuple(kept[: self._capacity])

    def resize(self, new_capacity: int) -> None:
        """Change capacity, keeping only the most recent new_capacity entries.

        Shrinking below the current occupancy is routine and not an error.

        Args:
            new_capacity: New maximum number of entries. Must be >= 1.

        Raises:
            ValueError: If new_capacity < 1.
        """
        self._check_capacity(new_capacity)
        dropped = max(0, len(self._entries) - new_capacity)
        self._capacity = new_capacity
        if dropped:
            self._entries = self._entries[:new_capacity]
            logger.debug("History resized to %d, dropped %d oldest", new_capacity, dropped)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries = ()

    def snapshot(self) -> tuple[str, ...]:
        """Current texts, most recent first. Immutable copy."""
        return tuple(entry.text for entry in self._entries)

    def entries(self) -> tuple[HistoryEntry, ...]:
        """Current entries with display metadata, most recent first."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: object) -> bool:
        return any(entry.text == text for entry in self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"HistoryStore(capacity={self._capacity}, size={len(self._entries)})"
