"""Error kinds raised while locating, opening and tallying history files.

Every error is fatal for the current invocation: nothing is retried and no
partial result is returned. The CLI prints the message and exits nonzero.
"""

from __future__ import annotations

from pathlib import Path

from cli_wrapped.helpers.helpers_logging import print_error


# ---------------------------------------------------------------------------
# Error types
# ---------------------------------------------------------------------------


class ShellError(Exception):
    """Base class for all history errors."""

    default_message = "shell history error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class FindError(ShellError):
    """The home directory could not be determined."""

    default_message = "failed to find the home directory"


class OpenError(ShellError):
    """The history file could not be opened."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"failed to open the history file `{self.path}`")


class InvalidUTF8(ShellError):
    """The history path cannot be rendered as UTF-8 text."""

    default_message = "filename contains invalid UTF-8"


class ReadError(ShellError):
    """A line of the history file could not be decoded."""

    default_message = "failed to read a line"


class ParseError(ShellError):
    """Reserved for history formats that fail to parse."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"failed to parse the history file `{self.path}`")


class CountError(ShellError):
    """The invocation count was missing right after being set."""

    default_message = "for some reason, the command count failed"
