"""History entry type."""
from __future__ import annotations

import time
from dataclasses import dataclass

from clipkeeper.core.constants import DEFAULT_PREVIEW_LENGTH


@dataclass(frozen=True)
class HistoryEntry:
    """A single distinct clipboard text value.

    Identity is the text alone. The remaining fields are display metadata and
    never take part in deduplication or ordering.
    """

    text: str
    copied_at: float = 0.0  # Unix timestamp
    char_count: int = 0
    line_count: int = 0

    @classmethod
    def from_text(cls, text: str, copied_at: float | None = None) -> HistoryEntry:
        """Create entry from text, computing character/line counts."""
        return cls(
            text=text,
            copied_at=time.time() if copied_at is None else copied_at,
            char_count=len(text),
            line_count=text.count("\n")
            + (1 if text and not text.endswith("\n") else 0),
        )

    def preview(self, max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
        """Text cut to max_length characters, with '...' appended when cut."""
        if len(self.text) > max_length:
            return self.text[:max_length] + "..."
        return self.text

    def info(self, index: int) -> str:
        """One-based position and size, e.g. '1. 42 characters'."""
        return f"{index + 1}. {self.char_count} characters"
