"""System clipboard backed by pyperclip.

pyperclip picks the platform mechanism (xclip/xsel/wl-clipboard on Linux,
pbcopy/pbpaste on macOS, the Win32 API on Windows). Its calls block and may
spawn a subprocess, so they run in a worker thread and are awaited from the
event loop.

Reads go through one dedicated worker. A read whose awaiting tick timed out
keeps that worker busy until the backend returns; further reads fail fast
with ClipboardUnavailableError instead of piling up more blocked threads.
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor

import pyperclip

from clipkeeper.core.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)


class SystemClipboard:
    """ClipboardPort for the desktop clipboard buffer."""

    def __init__(self) -> None:
        self._reader = ThreadPoolExecutor(max_workers=1, thread_name_prefix="clipkeeper-paste")
        self._pending_read: Future[str] | None = None

    @staticmethod
    def is_available() -> bool:
        """True if pyperclip found a working copy/paste mechanism.

        pyperclip picks its backend lazily on first use, so this checks with
        a real paste.
        """
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.debug("System clipboard check failed: %s", e)
            return False
        return True

    @property
    def read_in_progress(self) -> bool:
        """True while a previous paste is still running in the worker."""
        return self._pending_read is not None and not self._pending_read.done()

    async def read_text(self) -> str | None:
        """Read the clipboard text.

        Raises:
            ClipboardUnavailableError: If pyperclip has no backend, the
                backend command fails, or an earlier read is still stuck.
        """
        if self.read_in_progress:
            raise ClipboardUnavailableError("read", "previous read is still running")
        self._pending_read = self._reader.submit(pyperclip.paste)
        try:
            text = await asyncio.wrap_future(self._pending_read)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError("read", str(e)) from e
        return text or None

    async def write_text(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            ClipboardUnavailableError: If pyperclip has no backend or the
                backend command fails.
        """
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError("write", str(e)) from e
        logger.debug("Wrote %d characters to system clipboard", len(text))
