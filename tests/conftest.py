"""Shared fixtures for the cli-wrapped test suite.

Every test runs with an isolated home directory and config location, so the
real ``~/.bash_history`` or ``~/.config/cli-wrapped/config.yaml`` of the
machine running the tests is never read.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

WriteHistory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and XDG_CONFIG_HOME at empty temporary directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CLI_WRAPPED_CONFIG", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return home


@pytest.fixture()
def write_history(tmp_path: Path) -> WriteHistory:
    """Return a helper that writes history lines to a file.

    Usage in tests::

        def test_x(write_history: WriteHistory) -> None:
            path = write_history(["ls", "cd /tmp"])
            path = write_history(["ls"], name=".zsh_history", directory=home)

    Lines are joined with ``\\n`` and the file ends with a trailing newline,
    like the files bash and zsh write.
    """

    def _write(
        lines: list[str],
        name: str = "history",
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory if directory is not None else tmp_path
        path = target_dir / name
        content = "".join(line + "\n" for line in lines)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
