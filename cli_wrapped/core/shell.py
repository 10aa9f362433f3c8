"""Shell session: one history source plus the cached invocation count.

One ``Shell`` object represents one run of the tool. Every query re-reads the
history file; nothing is cached except ``invocation_count``.

Usage:
    >>> from cli_wrapped.core.shell import Shell
    >>> from cli_wrapped.core.history import ShellType
    >>> shell = Shell.from_shell_type(ShellType.BASH)
    >>> commands = shell.command_frequency()
    >>> total = shell.count_invocations()
"""

from __future__ import annotations

from pathlib import Path

from cli_wrapped.core import frequency
from cli_wrapped.core.errors import CountError
from cli_wrapped.core.frequency import DEFAULT_TOP_N, FrequencyTable
from cli_wrapped.core.history import (
    CustomPath,
    HistorySource,
    ShellType,
    StandardShell,
    read_history,
)


class Shell:
    """History statistics for one history source.

    Attributes:
        source: Where the history lines come from.
        invocation_count: Number of lines seen by the last call to
            ``invocation_frequency`` or ``count_invocations``; None before
            either has run. ``command_frequency`` never changes it.
    """

    def __init__(self, source: HistorySource) -> None:
        self.source = source
        self.invocation_count: int | None = None

    @classmethod
    def from_shell_type(cls, shell_type: ShellType) -> Shell:
        return cls(StandardShell(shell_type))

    @classmethod
    def from_custom(cls, path: str | Path) -> Shell:
        return cls(CustomPath(Path(path)))

    def __repr__(self) -> str:
        return f"Shell(source={self.source!r}, invocation_count={self.invocation_count!r})"

    def history_path(self) -> Path:
        return self.source.resolve()

    def lines(self) -> list[str]:
        """Read all history lines from the source."""
        return read_history(self.history_path())

    def _lines_or_read(self, lines: list[str] | None) -> list[str]:
        return lines if lines is not None else self.lines()

    def count_invocations(self, lines: list[str] | None = None) -> int:
        """Set ``invocation_count`` to the number of history lines and return it.

        Pass ``lines`` already read with ``lines()`` to count them instead of
        reading the source again.

        Raises:
            ShellError: If the history cannot be located or read
        """
        self.invocation_count = len(self._lines_or_read(lines))
        if self.invocation_count is None:
            raise CountError()
        return self.invocation_count

    def invocation_frequency(self, lines: list[str] | None = None) -> FrequencyTable:
        """Count each distinct history line and update ``invocation_count``."""
        lines = self._lines_or_read(lines)
        table = frequency.invocation_frequency(lines)
        self.invocation_count = len(lines)
        return table

    def command_frequency(self, lines: list[str] | None = None) -> FrequencyTable:
        """Count each command name. ``invocation_count`` is left as it was."""
        return frequency.command_frequency(self._lines_or_read(lines))

    def top_commands(
        self,
        n: int = DEFAULT_TOP_N,
        lines: list[str] | None = None,
    ) -> list[tuple[str, int]]:
        return frequency.rank_with_counts(self.command_frequency(lines), n)

    def top_invocations(
        self,
        n: int = DEFAULT_TOP_N,
        lines: list[str] | None = None,
    ) -> list[tuple[str, int]]:
        return frequency.rank_with_counts(self.invocation_frequency(lines), n)
