"""UTF-8 encoding constants and helpers for ClipKeeper."""

import sys

ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # Preserve data, mark corruption


def configure_stdio() -> None:
    """Reconfigure stdin/stdout/stderr to use UTF-8 with replace error handling.

    Clipboard contents are arbitrary user text, so the console must not die on
    a character the platform's default codec can't encode.
    """
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS)
