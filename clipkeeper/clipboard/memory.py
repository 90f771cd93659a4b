"""In-process clipboard, for tests and hosts without a desktop clipboard."""
from __future__ import annotations

from clipkeeper.core.errors import ClipboardUnavailableError


class MemoryClipboard:
    """ClipboardPort holding its text in memory.

    Example:
        clipboard = MemoryClipboard()
        await clipboard.write_text("hello")
        await clipboard.read_text()  # "hello"
    """

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.available = True
        self.read_count = 0
        self.write_count = 0

    async def read_text(self) -> str | None:
        self.read_count += 1
        if not self.available:
            raise ClipboardUnavailableError("read", "memory clipboard marked unavailable")
        return self.text

    async def write_text(self, text: str) -> None:
        self.write_count += 1
        if not self.available:
            raise ClipboardUnavailableError("write", "memory clipboard marked unavailable")
        self.text = text
