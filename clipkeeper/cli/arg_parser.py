"""Argument parsing for the ClipKeeper CLI."""

import argparse
from pathlib import Path

from clipkeeper import __version__


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add options used by both the REPL and watch modes."""
    parser.add_argument(
        "--config", "-c",
        type=Path,
        metavar="PATH",
        help="Config file to load and follow (default: layered ~/.clipkeeper + ./.clipkeeper)",
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        metavar="MS",
        help="Clipboard polling interval in milliseconds (overrides config)",
    )
    parser.add_argument(
        "--skip-initial",
        action="store_true",
        help="Don't record what is already on the clipboard at startup",
    )
    parser.add_argument(
        "--no-reload",
        dest="live_reload",
        action="store_false",
        help="Don't apply config file edits while running",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logs on the console",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="PATH",
        help="Directory for clipkeeper.log (default: ~/.clipkeeper/logs)",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="clipkeeper",
        description="Keep a short, deduplicated history of copied text",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command")

    # Options go before the subcommand: clipkeeper --config cfg.json watch
    subparsers.add_parser(
        "watch",
        help="Run headless, printing each newly copied entry",
        description="Watch the clipboard without an interactive prompt. Stop with Ctrl+C.",
    )

    subparsers.add_parser(
        "repl",
        help="Interactive history browser (default)",
    )

    args = parser.parse_args(argv)
    if args.interval_ms is not None and args.interval_ms < 50:
        parser.error("--interval-ms must be at least 50")
    return args
