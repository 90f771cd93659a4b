"""Core interfaces (protocols) for ClipKeeper.

The history engine talks to the platform only through these protocols, so the
clipboard backend, the status indicator and the notification sink can be
swapped (system clipboard vs. in-memory, terminal vs. desktop) without
touching the core.
"""

from typing import Protocol


class ClipboardPort(Protocol):
    """Protocol for the shared, externally owned text clipboard.

    Example:
        class MyClipboard:
            async def read_text(self) -> str | None:
                return "copied text"

            async def write_text(self, text: str) -> None:
                ...
    """

    async def read_text(self) -> str | None:
        """Return the current clipboard text, or None/"" when there is none.

        Raises:
            ClipboardUnavailableError: If the backend can't be read. The
                watcher treats this as "no change".
        """
        ...

    async def write_text(self, text: str) -> None:
        """Replace the clipboard contents with text.

        Raises:
            ClipboardUnavailableError: If the backend can't be written.
        """
        ...


class IndicatorPort(Protocol):
    """Protocol for the optional status indicator (panel icon)."""

    def set_visible(self, visible: bool) -> None:
        """Show or hide the indicator."""
        ...


class Notifier(Protocol):
    """Protocol for user-facing notifications (e.g. after selecting an entry)."""

    def __call__(self, title: str, body: str) -> None:
        ...
