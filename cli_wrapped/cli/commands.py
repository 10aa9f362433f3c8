#!/usr/bin/env python3
"""cli-wrapped - Main Entry Point.

Reports how often each command appears in a shell history file.

Usage:
    cli-wrapped [options]

Options:
    -s, --shell-type [zsh|bash]   Shell whose history file is read (default: bash)
    -p, --path-to-history PATH    Read this history file instead
    -n, --top N                   Also print the N most frequent commands and invocations
    --config PATH                 Read defaults from this YAML file
    -v, --verbose                 Print where the history is read from

Output:
    The command-frequency mapping, then the total number of history lines.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cli_wrapped import __version__
from cli_wrapped.core.errors import ShellError
from cli_wrapped.core.history import ShellType
from cli_wrapped.core.shell import Shell
from cli_wrapped.helpers.config import ConfigError, Settings, load_settings
from cli_wrapped.helpers.helpers_logging import (
    print_error,
    print_header,
    print_info,
    print_success,
)

_PROG_NAME = "cli-wrapped"
_EXIT_ERROR = 1
_EXIT_ABORTED = 130


def build_shell(
    settings: Settings,
    shell_type: str | None,
    path_to_history: Path | None,
) -> Shell:
    """Create the session from CLI options, falling back to config settings.

    A custom history path, from either source, wins over the shell type.
    """
    if path_to_history is not None:
        return Shell.from_custom(path_to_history)
    if shell_type is not None:
        return Shell.from_shell_type(ShellType.parse(shell_type))
    if settings.path_to_history is not None:
        return Shell.from_custom(settings.path_to_history)
    return Shell.from_shell_type(settings.shell_type)


def _print_ranking(title: str, ranking: list[tuple[str, int]]) -> None:
    print_header(title)
    if not ranking:
        print("  (none)")
        return
    width = max(len(str(count)) for _key, count in ranking)
    for key, count in ranking:
        print(f"  {count:>{width}}  {key}")


def report(shell: Shell, top: int | None, verbose: bool = False) -> int:
    """Print command frequency and line count for ``shell``.

    The history is read once; every printed figure comes from the same lines.

    Raises:
        ShellError: If the history cannot be located or read
    """
    if verbose:
        print_info(f"Reading {shell.source.describe()} from {shell.history_path()}")

    lines = shell.lines()

    freq = shell.command_frequency(lines)
    print(freq)

    total = shell.count_invocations(lines)
    print(total)

    if top is not None:
        print()
        _print_ranking(f"Top {top} commands", shell.top_commands(top, lines))
        print()
        _print_ranking(f"Top {top} invocations", shell.top_invocations(top, lines))

    if verbose:
        print_success(f"Tallied {total} history lines")
    return 0


@click.command(
    name=_PROG_NAME,
    help="Report command usage statistics from a shell history file.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-s", "--shell-type",
              type=click.Choice([member.value for member in ShellType], case_sensitive=False),
              default=None,
              help="Shell whose history file is read  [default: bash]")
@click.option("-p", "--path-to-history",
              type=click.Path(path_type=Path),
              default=None,
              help="Path to a custom history file, formatted like other shell history files")
@click.option("-n", "--top", type=click.IntRange(min=0), default=None,
              help="Also print the N most frequent commands and invocations")
@click.option("--config", "config_path",
              type=click.Path(path_type=Path),
              default=None,
              help="YAML file with default settings")
@click.option("-v", "--verbose", is_flag=True, help="Print where the history is read from")
@click.version_option(__version__, prog_name=_PROG_NAME)
def _click_cli(
    shell_type: str | None,
    path_to_history: Path | None,
    top: int | None,
    config_path: Path | None,
    verbose: bool,
) -> int:
    """Top-level cli-wrapped command."""
    settings = load_settings(config_path)
    shell = build_shell(settings, shell_type, path_to_history)
    effective_top = top if top is not None else settings.top
    return report(shell, effective_top, verbose=verbose)


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name=_PROG_NAME,
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_ABORTED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except ShellError as exc:
        exc.print_error()
        return _EXIT_ERROR
    except ConfigError as exc:
        print_error(str(exc))
        return _EXIT_ERROR

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
