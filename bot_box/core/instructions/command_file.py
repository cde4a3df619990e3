"""
Command File Reader
Loads raw instruction lines from a plain text file.

The file must exist, be readable, carry no extension, stay under the size
limit and decode as UTF-8. Any violation raises CommandFileError because the
session cannot start without its instructions.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from bot_box.core.observability.logging import get_logger

logger = get_logger("command_file")

MAX_FILE_SIZE = 1024 * 1024  # 1 MiB


class CommandFileError(ValueError):
    """Instruction file is missing or unusable."""


def max_file_size() -> int:
    """Size limit in bytes ($BOT_BOX_MAX_FILE_SIZE overrides the default)."""
    raw = os.getenv("BOT_BOX_MAX_FILE_SIZE")
    if not raw:
        return MAX_FILE_SIZE
    try:
        value = int(raw)
    except ValueError as exc:
        raise CommandFileError("BOT_BOX_MAX_FILE_SIZE must be an integer") from exc
    if value < 1:
        raise CommandFileError("BOT_BOX_MAX_FILE_SIZE must be >= 1")
    return value


def load_command_file(
    command_file: Optional[Union[str, Path]],
    max_size: Optional[int] = None
) -> List[str]:
    """
    Read instruction lines from a command file.

    Args:
        command_file: Path to the instruction file
        max_size: Size limit in bytes (default: max_file_size())

    Returns:
        Stripped, non-empty lines in file order

    Raises:
        CommandFileError: when the file fails any validation check
    """
    path = _validate_command_file(command_file, max_size or max_file_size())

    try:
        content = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CommandFileError("Command file must be a plain text file") from exc
    except OSError as exc:
        raise CommandFileError("Command file is not readable") from exc

    commands = []
    for command_line in content.splitlines():
        command_line = command_line.strip()
        # Skip empty lines
        if not command_line:
            continue
        commands.append(command_line)

    logger.info(f"Successfully parsed {len(commands)} commands", path=str(path))
    return commands


def _validate_command_file(command_file: Optional[Union[str, Path]], max_size: int) -> Path:
    """Validate the command file before processing."""
    if command_file is None or str(command_file) == "":
        raise CommandFileError("Command file is required")

    path = Path(command_file)
    if not path.exists():
        raise CommandFileError("Command file does not exist")
    if not path.is_file() or not os.access(path, os.R_OK):
        raise CommandFileError("Command file is not readable")
    if "." in path.name:
        raise CommandFileError("Command file type is not valid")
    if path.stat().st_size > max_size:
        raise CommandFileError("Command file size is too large")
    return path
