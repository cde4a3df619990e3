"""Tests for bot_box.core.instructions.command_file."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from bot_box.core.instructions.command_file import (
    MAX_FILE_SIZE,
    CommandFileError,
    load_command_file,
    max_file_size,
)


def _write(tmp_path: Path, name: str, content: str | bytes) -> Path:
    path = tmp_path / name
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


class TestLoadCommandFile:
    def test_strips_and_skips_blank_lines(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "  PLACE 1,2,EAST \n\nMOVE\r\n   \nREPORT\n")
        assert load_command_file(path) == ["PLACE 1,2,EAST", "MOVE", "REPORT"]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "MOVE\n")
        assert load_command_file(str(path)) == ["MOVE"]

    def test_empty_file_gives_no_commands(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "")
        assert load_command_file(path) == []

    def test_invalid_lines_are_kept_for_the_executor(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "move\nPLACE a,2,NORTH\n")
        assert load_command_file(path) == ["move", "PLACE a,2,NORTH"]


class TestValidation:
    @pytest.mark.parametrize("value", [None, ""])
    def test_required(self, value: str | None) -> None:
        with pytest.raises(CommandFileError, match="required"):
            load_command_file(value)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(CommandFileError, match="does not exist"):
            load_command_file(tmp_path / "nope")

    def test_directory_is_not_readable(self, tmp_path: Path) -> None:
        directory = tmp_path / "commands"
        directory.mkdir()
        with pytest.raises(CommandFileError, match="not readable"):
            load_command_file(directory)

    def test_extension_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands.txt", "MOVE\n")
        with pytest.raises(CommandFileError, match="type is not valid"):
            load_command_file(path)

    def test_too_large(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "MOVE\n" * 10)
        with pytest.raises(CommandFileError, match="too large"):
            load_command_file(path, max_size=10)

    def test_binary_content_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", b"\xff\xfe\x00MOVE")
        with pytest.raises(CommandFileError, match="plain text"):
            load_command_file(path)

    def test_read_failure_is_not_readable(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "commands", "MOVE\n")
        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(CommandFileError, match="not readable"):
                load_command_file(path)

    def test_error_is_value_error(self) -> None:
        assert issubclass(CommandFileError, ValueError)


class TestMaxFileSize:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BOT_BOX_MAX_FILE_SIZE", raising=False)
        assert max_file_size() == MAX_FILE_SIZE

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("BOT_BOX_MAX_FILE_SIZE", "4")
        assert max_file_size() == 4
        path = _write(tmp_path, "commands", "REPORT\n")
        with pytest.raises(CommandFileError, match="too large"):
            load_command_file(path)

    @pytest.mark.parametrize("raw", ["abc", "0", "-5"])
    def test_invalid_env(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("BOT_BOX_MAX_FILE_SIZE", raw)
        with pytest.raises(CommandFileError):
            max_file_size()
