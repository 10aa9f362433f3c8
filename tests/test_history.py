"""Tests for locating and reading history files."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli_wrapped.core.errors import FindError, InvalidUTF8, OpenError, ReadError
from cli_wrapped.core.history import (
    CustomPath,
    ShellType,
    StandardShell,
    find_history_path,
    read_history,
)
from tests.conftest import WriteHistory


class TestShellType:
    def test_display_names(self) -> None:
        assert str(ShellType.ZSH) == "zsh"
        assert str(ShellType.BASH) == "bash"

    @pytest.mark.parametrize(("text", "expected"), [("zsh", ShellType.ZSH), ("BASH", ShellType.BASH)])
    def test_parse(self, text: str, expected: ShellType) -> None:
        assert ShellType.parse(text) is expected

    def test_parse_rejects_unknown_shell(self) -> None:
        with pytest.raises(ValueError, match="fish"):
            ShellType.parse("fish")


class TestFindHistoryPath:
    def test_uses_home_directory(self, isolated_home: Path) -> None:
        assert find_history_path(ShellType.ZSH) == isolated_home / ".zsh_history"
        assert find_history_path(ShellType.BASH) == isolated_home / ".bash_history"

    def test_explicit_home(self, tmp_path: Path) -> None:
        assert find_history_path(ShellType.BASH, home=tmp_path) == tmp_path / ".bash_history"

    def test_missing_file_is_not_an_error(self, isolated_home: Path) -> None:
        path = find_history_path(ShellType.ZSH)

        assert not path.exists()

    def test_unknown_home_raises_find_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _no_home() -> Path:
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", staticmethod(_no_home))

        with pytest.raises(FindError, match="home directory"):
            find_history_path(ShellType.BASH)


class TestHistorySources:
    def test_standard_shell_resolves_in_home(self, isolated_home: Path) -> None:
        assert StandardShell(ShellType.ZSH).resolve() == isolated_home / ".zsh_history"

    def test_custom_path_expands_user(self, isolated_home: Path) -> None:
        source = CustomPath(Path("~/old_history"))

        assert source.resolve() == isolated_home / "old_history"


class TestReadHistory:
    def test_reads_all_lines_in_order(self, write_history: WriteHistory) -> None:
        path = write_history(["ls", "cd /tmp", "pwd"])

        assert read_history(path) == ["ls", "cd /tmp", "pwd"]

    def test_keeps_surrounding_whitespace(self, write_history: WriteHistory) -> None:
        path = write_history(["  ls  ", "\tpwd"])

        assert read_history(path) == ["  ls  ", "\tpwd"]

    def test_strips_crlf_terminators(self, tmp_path: Path) -> None:
        path = tmp_path / "history"
        path.write_bytes(b"ls\r\npwd\r\n")

        assert read_history(path) == ["ls", "pwd"]

    def test_last_line_without_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "history"
        path.write_bytes(b"ls\npwd")

        assert read_history(path) == ["ls", "pwd"]

    def test_blank_lines_are_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "history"
        path.write_bytes(b"ls\n\npwd\n")

        assert read_history(path) == ["ls", "", "pwd"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "history"
        path.write_bytes(b"")

        assert read_history(path) == []

    def test_missing_file_raises_open_error(self, tmp_path: Path) -> None:
        path = tmp_path / "does-not-exist"

        with pytest.raises(OpenError) as excinfo:
            read_history(path)

        assert excinfo.value.path == str(path)
        assert str(path) in str(excinfo.value)

    def test_directory_raises_open_error(self, tmp_path: Path) -> None:
        with pytest.raises(OpenError):
            read_history(tmp_path)

    def test_undecodable_line_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "history"
        path.write_bytes(b"ls\n\xff\xfe broken\npwd\n")

        with pytest.raises(ReadError, match="failed to read a line"):
            read_history(path)

    def test_missing_non_utf8_path_raises_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "history-\udcff"

        with pytest.raises(InvalidUTF8):
            read_history(path)

    def test_existing_non_utf8_path_is_read(self, tmp_path: Path) -> None:
        path = tmp_path / "history-\udcff"
        path.write_bytes(b"ls\nls\n")

        assert read_history(path) == ["ls", "ls"]
