"""Locate and read shell history files.

A history file holds one command per line, plain UTF-8 text with no header and
no timestamps. The whole file is materialized as a list of lines before any
aggregation happens.

Usage:
    >>> from cli_wrapped.core.history import ShellType, StandardShell, read_history
    >>> lines = read_history(StandardShell(ShellType.ZSH).resolve())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cli_wrapped.core.errors import FindError, InvalidUTF8, OpenError, ReadError

_HISTORY_FILENAMES = {
    "zsh": ".zsh_history",
    "bash": ".bash_history",
}


# ---------------------------------------------------------------------------
# Shell types
# ---------------------------------------------------------------------------


class ShellType(Enum):
    """Shells whose history file can be located in the home directory."""

    ZSH = "zsh"
    BASH = "bash"

    def __str__(self) -> str:
        return self.value

    @property
    def history_filename(self) -> str:
        """Return the history filename, relative to the home directory."""
        return _HISTORY_FILENAMES[self.value]

    @classmethod
    def parse(cls, text: str) -> ShellType:
        """Return the shell type named by ``text`` (case-insensitive).

        Raises:
            ValueError: If ``text`` names no known shell
        """
        lowered = text.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown shell type '{text}'. Expected one of: {choices}")


def home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        FindError: If the platform cannot determine it
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise FindError() from exc


def expand_user(path: Path) -> Path:
    """Expand a leading ``~``, raising FindError when the home directory is unknown."""
    try:
        return path.expanduser()
    except (RuntimeError, KeyError) as exc:
        raise FindError() from exc


def find_history_path(shell_type: ShellType, home: Path | None = None) -> Path:
    """Return the history file of ``shell_type`` in the user's home directory.

    The file is not required to exist; opening it is the reader's job.

    Raises:
        FindError: If the home directory cannot be determined
    """
    base = home if home is not None else home_dir()
    return base / shell_type.history_filename


# ---------------------------------------------------------------------------
# History sources
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StandardShell:
    """History file of a known shell, found in the home directory."""

    shell_type: ShellType

    def resolve(self) -> Path:
        return find_history_path(self.shell_type)

    def describe(self) -> str:
        return f"{self.shell_type} history"


@dataclass(frozen=True)
class CustomPath:
    """History file at an arbitrary path, in the one-command-per-line format."""

    path: Path

    def resolve(self) -> Path:
        return expand_user(self.path)

    def describe(self) -> str:
        return f"custom history {self.path}"


HistorySource = StandardShell | CustomPath


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def _open_error(path: Path) -> OpenError | InvalidUTF8:
    """Return the error for a failed open, depending on whether ``path`` is valid text."""
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return InvalidUTF8()
    return OpenError(text)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_history(path: Path) -> list[str]:
    """Read every line of the history file at ``path``.

    Lines are split on ``\\n`` only; the terminator (and a ``\\r`` right before
    it) is removed. Everything else, leading and trailing blanks included, is
    kept verbatim.

    Args:
        path: History file to read

    Returns:
        All lines of the file, in file order

    Raises:
        OpenError: If the file cannot be opened
        InvalidUTF8: If the file cannot be opened and its path cannot be
            rendered as UTF-8
        ReadError: If a line cannot be decoded as UTF-8
    """
    try:
        file = open(path, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise _open_error(path) from exc

    with file:
        try:
            return [_strip_terminator(line) for line in file]
        except (UnicodeDecodeError, OSError) as exc:
            raise ReadError() from exc
