"""Entry point for the ClipKeeper CLI."""

import asyncio
import logging

from dotenv import load_dotenv
from rich.text import Text

from clipkeeper.cli.arg_parser import parse_args
from clipkeeper.cli.bootstrap import configure_logging
from clipkeeper.core.constants import get_log_dir
from clipkeeper.core.encoding import configure_stdio
from clipkeeper.core.errors import ClipkeeperError
from clipkeeper.display.console import get_console


def main(argv: list[str] | None = None) -> None:
    """Entry point for the clipkeeper command."""
    configure_stdio()
    # .env may set CLIPKEEPER_HOME, so load it before any path is resolved
    load_dotenv()
    args = parse_args(argv)

    configure_logging(
        args.log_dir or get_log_dir(),
        level=logging.DEBUG if args.verbose else logging.INFO,
        console_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    options = dict(
        config_path=args.config,
        interval_ms=args.interval_ms,
        skip_initial=args.skip_initial,
        live_reload=args.live_reload,
    )
    try:
        if args.command == "watch":
            from clipkeeper.cli.headless import run_watch

            asyncio.run(run_watch(**options))
        else:
            from clipkeeper.cli.repl import run_repl

            asyncio.run(run_repl(**options))
    except ClipkeeperError as e:
        get_console().print(Text(f"Error: {e.message}", style="bold red"))
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
