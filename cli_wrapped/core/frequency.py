"""Frequency tables over history lines, and top-N ranking.

Two tallies are built from the same lines:

- invocation frequency: the raw line is the key, verbatim
- command frequency: the key is the command extracted from the line

Rankings sort by count descending and break ties by key ascending, so the
same table always ranks the same way.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from cli_wrapped.core.classifier import extract_command

FrequencyTable = dict[str, int]

DEFAULT_TOP_N = 5


def invocation_frequency(lines: Iterable[str]) -> FrequencyTable:
    """Count each distinct line, unmodified and case-sensitive."""
    counts: dict[str, int] = defaultdict(int)
    for line in lines:
        counts[line] += 1
    return dict(counts)


def command_frequency(lines: Iterable[str]) -> FrequencyTable:
    """Count the command of each line; lines without a command are skipped."""
    counts: dict[str, int] = defaultdict(int)
    for line in lines:
        command = extract_command(line)
        if command is None:
            continue
        counts[command] += 1
    return dict(counts)


def _ordered_items(table: FrequencyTable) -> list[tuple[str, int]]:
    return sorted(table.items(), key=lambda item: (-item[1], item[0]))


def rank_with_counts(table: FrequencyTable, n: int = DEFAULT_TOP_N) -> list[tuple[str, int]]:
    """Return the ``n`` most frequent ``(key, count)`` pairs.

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"Ranking size must be non-negative, got {n}")
    return _ordered_items(table)[:n]


def rank(table: FrequencyTable, n: int = DEFAULT_TOP_N) -> list[str]:
    """Return the keys of the ``n`` most frequent entries, most frequent first.

    Fewer than ``n`` keys are returned when the table is smaller than that.

    Raises:
        ValueError: If ``n`` is negative
    """
    return [key for key, _count in rank_with_counts(table, n)]
