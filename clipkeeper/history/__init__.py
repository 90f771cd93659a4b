"""Clipboard history store."""
from clipkeeper.history.store import HistoryStore
from clipkeeper.history.types import HistoryEntry

__all__ = [
    "HistoryEntry",
    "HistoryStore",
]
