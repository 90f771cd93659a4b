"""Tests for SystemClipboard with pyperclip patched out."""

import asyncio
import threading
from unittest.mock import patch

import pyperclip
import pytest

from clipkeeper.clipboard.system import SystemClipboard
from clipkeeper.core.errors import ClipboardUnavailableError


class TestSystemClipboard:
    """Tests for the pyperclip-backed clipboard."""

    @pytest.mark.asyncio
    async def test_read_returns_paste(self) -> None:
        with patch("clipkeeper.clipboard.system.pyperclip.paste", return_value="copied"):
            assert await SystemClipboard().read_text() == "copied"

    @pytest.mark.asyncio
    async def test_empty_read_is_none(self) -> None:
        """pyperclip reports an empty clipboard as ''; that reads as None."""
        with patch("clipkeeper.clipboard.system.pyperclip.paste", return_value=""):
            assert await SystemClipboard().read_text() is None

    @pytest.mark.asyncio
    async def test_write_calls_copy(self) -> None:
        with patch("clipkeeper.clipboard.system.pyperclip.copy") as copy:
            await SystemClipboard().write_text("hello")
        copy.assert_called_once_with("hello")

    @pytest.mark.asyncio
    async def test_read_failure_is_wrapped(self) -> None:
        """Backend errors surface as ClipboardUnavailableError."""
        error = pyperclip.PyperclipException("no xclip")
        with patch("clipkeeper.clipboard.system.pyperclip.paste", side_effect=error):
            with pytest.raises(ClipboardUnavailableError) as exc_info:
                await SystemClipboard().read_text()
        assert exc_info.value.operation == "read"
        assert "no xclip" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_write_failure_is_wrapped(self) -> None:
        error = pyperclip.PyperclipException("no xclip")
        with patch("clipkeeper.clipboard.system.pyperclip.copy", side_effect=error):
            with pytest.raises(ClipboardUnavailableError):
                await SystemClipboard().write_text("x")

    def test_is_available_false_on_error(self) -> None:
        """A failing paste reports unavailable instead of raising."""
        error = pyperclip.PyperclipException("no backend")
        with patch("clipkeeper.clipboard.system.pyperclip.paste", side_effect=error):
            assert SystemClipboard.is_available() is False

    def test_is_available_true(self) -> None:
        with patch("clipkeeper.clipboard.system.pyperclip.paste", return_value=""):
            assert SystemClipboard.is_available() is True

    @pytest.mark.asyncio
    async def test_stuck_read_blocks_further_reads(self) -> None:
        """A timed-out paste still running in its thread isn't joined by another."""
        release = threading.Event()
        calls: list[int] = []

        def hung_paste() -> str:
            calls.append(1)
            release.wait(5)
            return "late"

        clipboard = SystemClipboard()
        with patch("clipkeeper.clipboard.system.pyperclip.paste", side_effect=hung_paste):
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(clipboard.read_text(), timeout=0.05)
            assert clipboard.read_in_progress

            with pytest.raises(ClipboardUnavailableError, match="still running"):
                await clipboard.read_text()
            assert len(calls) == 1

            release.set()
            loop = asyncio.get_running_loop()
            deadline = loop.time() + 2.0
            while clipboard.read_in_progress:
                assert loop.time() < deadline
                await asyncio.sleep(0.01)

            assert await clipboard.read_text() == "late"
        assert len(calls) == 2
