"""Clipboard access and change detection."""
from clipkeeper.clipboard.memory import MemoryClipboard
from clipkeeper.clipboard.system import SystemClipboard
from clipkeeper.clipboard.watcher import ClipboardWatcher, WatcherHealth

__all__ = [
    "ClipboardWatcher",
    "MemoryClipboard",
    "SystemClipboard",
    "WatcherHealth",
]
