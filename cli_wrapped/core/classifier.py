"""Find the command that was run on a raw history line.

This is a heuristic, not a shell parser. The line is split on whitespace and
leading ``NAME=VALUE`` assignments are skipped, so ``FOO=bar make test`` is
counted as ``make``. Pipelines (``|``), conjunctions (``&&``) and line
continuations (``\\``) are not split: ``git log | less`` is one ``git``
invocation.
"""

from __future__ import annotations


def _is_assignment(token: str) -> bool:
    return "=" in token


def extract_command(line: str) -> str | None:
    """Return the command name of ``line``, or None if the line has none.

    Any token containing ``=`` is skipped while looking for the command, so a
    blank line or a bare ``FOO=bar`` has no command.

    Examples:
        >>> extract_command("cd /tmp")
        'cd'
        >>> extract_command("FOO=1 echo bye")
        'echo'
        >>> extract_command("FOO=bar") is None
        True
    """
    for token in line.split():
        if _is_assignment(token):
            continue
        return token
    return None
