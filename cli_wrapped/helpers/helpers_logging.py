"""Terminal output helpers for the cli-wrapped CLI.

Report data goes to stdout undecorated. These helpers cover everything around
it: section headers, progress notes, warnings and errors. Warnings and errors
go to stderr so the report stays parseable.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def use_color(stream: TextIO) -> bool:
    """Return True when ANSI colors should be written to ``stream``.

    Honors the ``NO_COLOR`` convention and skips colors for pipes and files.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _emit(msg: str, color: str, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    if use_color(out):
        print(f"{color}{msg}{Colors.RESET}", file=out)
    else:
        print(msg, file=out)


def print_header(msg: str) -> None:
    """Print a header message."""
    _emit(msg, Colors.HEADER + Colors.BOLD)


def print_info(msg: str) -> None:
    """Print an info message."""
    _emit(msg, Colors.CYAN)


def print_success(msg: str) -> None:
    """Print a success message."""
    _emit(f"✓ {msg}", Colors.GREEN)


def print_warning(msg: str) -> None:
    """Print a warning message to stderr."""
    _emit(f"⚠️  {msg}", Colors.YELLOW, sys.stderr)


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    _emit(f"❌ {msg}", Colors.RED, sys.stderr)
