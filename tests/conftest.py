"""Shared pytest fixtures and configuration for pytest."""

import asyncio
from collections.abc import Callable, Iterable

import pytest

from clipkeeper.clipboard.memory import MemoryClipboard
from clipkeeper.config.channel import SettingsStore


class ScriptedClipboard:
    """ClipboardPort returning a scripted sequence of reads.

    Each read returns the next item; the last item repeats once the script
    runs out. Exception instances in the script are raised instead of
    returned. Writes are recorded and become the value of subsequent reads.
    """

    def __init__(self, script: Iterable[object] = ()) -> None:
        self.script = list(script)
        self.reads = 0
        self.writes: list[str] = []
        self._last: object = None

    async def read_text(self) -> str | None:
        self.reads += 1
        if self.script:
            self._last = self.script.pop(0)
        if isinstance(self._last, BaseException):
            raise self._last
        return self._last  # type: ignore[return-value]

    async def write_text(self, text: str) -> None:
        self.writes.append(text)
        self._last = text

    def push(self, *items: object) -> None:
        self.script.extend(items)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test that waits on real timers")


@pytest.fixture
def memory_clipboard() -> MemoryClipboard:
    """Empty in-memory clipboard."""
    return MemoryClipboard()


@pytest.fixture
def scripted_clipboard() -> type[ScriptedClipboard]:
    """The ScriptedClipboard class, for building per-test scripts."""
    return ScriptedClipboard


@pytest.fixture
def settings() -> SettingsStore:
    """Settings store with default values."""
    return SettingsStore()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point CLIPKEEPER_HOME at a temp dir so tests never read ~/.clipkeeper."""
    home = tmp_path / "clipkeeper-home"
    monkeypatch.setenv("CLIPKEEPER_HOME", str(home))
    return home


async def _wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.005)


@pytest.fixture
def wait_until() -> Callable[..., object]:
    """Async helper polling a predicate until true (fails after timeout)."""
    return _wait_until
