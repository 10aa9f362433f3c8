"""History parsing, frequency tables and ranking."""

from cli_wrapped.core.errors import (
    CountError,
    FindError,
    InvalidUTF8,
    OpenError,
    ParseError,
    ReadError,
    ShellError,
)
from cli_wrapped.core.frequency import command_frequency, invocation_frequency, rank
from cli_wrapped.core.history import CustomPath, ShellType, StandardShell, read_history
from cli_wrapped.core.shell import Shell

__all__ = [
    "CountError",
    "CustomPath",
    "FindError",
    "InvalidUTF8",
    "OpenError",
    "ParseError",
    "ReadError",
    "Shell",
    "ShellError",
    "ShellType",
    "StandardShell",
    "command_frequency",
    "invocation_frequency",
    "rank",
    "read_history",
]
