"""Command-line interface for ClipKeeper."""

from clipkeeper.cli.main import main

__all__ = ["main"]
