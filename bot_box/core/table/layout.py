"""
Table Layout Loader
Builds the Grid from a board size string or a YAML layout file.

Layout file format:
    table:
      length: 5
      width: 5
      obstacles:
        - {x: 2, y: 3}
"""

import os
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import yaml

from bot_box.core.observability.logging import get_logger
from bot_box.core.table.grid import Cell, Grid

logger = get_logger("layout")

DEFAULT_BOARD_SIZE = "5,5"


class LayoutError(ValueError):
    """Table layout file is missing or malformed."""


def parse_board_size(board_size: str) -> Tuple[int, int]:
    """
    Parse "<length>,<width>" into two positive integers.

    Example:
        >>> parse_board_size("5, 4")
        (5, 4)
    """
    message = "Board size must be in the format of 'length,width'"
    if board_size is None:
        raise ValueError(message)

    parts = [part.strip() for part in board_size.split(",")]
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise ValueError(message)

    length, width = int(parts[0]), int(parts[1])
    if length < 1 or width < 1:
        raise ValueError("Board size values must be >= 1")
    return length, width


def load_layout(layout_file: Union[str, Path]) -> Grid:
    """
    Load a table layout from YAML.

    Raises:
        LayoutError: when the file cannot be read or does not describe a table
    """
    path = Path(layout_file)
    if not path.is_file():
        raise LayoutError(f"Layout file does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise LayoutError(f"Layout file is not valid YAML: {path}") from exc
    except OSError as exc:
        raise LayoutError(f"Layout file is not readable: {path}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("table"), dict):
        raise LayoutError("Layout must contain a 'table' mapping")

    table = data["table"]
    length = _require_int(table, "length")
    width = _require_int(table, "width")
    obstacles = _parse_obstacles(table.get("obstacles") or [])

    try:
        grid = Grid(length, width, frozenset(obstacles))
    except ValueError as exc:
        raise LayoutError(str(exc)) from exc

    outside = [cell for cell in grid.obstacles if not grid.contains(*cell)]
    if outside:
        logger.warning("Obstacles outside the table are ignored", obstacles=sorted(outside))

    logger.info("Layout loaded",
               path=str(path),
               length=length,
               width=width,
               obstacles=len(grid.obstacles))
    return grid


def build_grid(board_size: Optional[str] = None, layout_file: Optional[str] = None) -> Grid:
    """
    Build the session grid.

    A layout file wins over a board size. Without either, falls back to
    $BOT_BOX_LAYOUT, then $BOT_BOX_BOARD_SIZE, then a 5x5 empty table.
    """
    if layout_file is None and board_size is None:
        layout_file = os.getenv("BOT_BOX_LAYOUT") or None

    if layout_file:
        return load_layout(layout_file)

    length, width = parse_board_size(
        board_size or os.getenv("BOT_BOX_BOARD_SIZE") or DEFAULT_BOARD_SIZE
    )
    logger.info("Initializing table top", length=length, width=width)
    return Grid(length, width)


def _require_int(table: dict, key: str) -> int:
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise LayoutError(f"table.{key} must be an integer")
    return value


def _parse_obstacles(raw_obstacles: Any) -> List[Cell]:
    if not isinstance(raw_obstacles, list):
        raise LayoutError("table.obstacles must be a list")

    obstacles = []
    for i, entry in enumerate(raw_obstacles, start=1):
        if not isinstance(entry, dict):
            raise LayoutError(f"Obstacle {i} must be a mapping with x and y")
        x, y = entry.get("x"), entry.get("y")
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (x, y)):
            raise LayoutError(f"Obstacle {i} must have integer x and y")
        obstacles.append((x, y))
    return obstacles
