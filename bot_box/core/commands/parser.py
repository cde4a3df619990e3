"""
Command Parser
Turns one raw instruction line into a typed Command.

Parsing is pure and silent: an invalid line yields None and the caller decides
whether to log it. Tokens are case-sensitive and must match exactly, so
"MOVE2" or "move" are rejected rather than treated as MOVE.

Grammar (one instruction per line):
    MOVE | LEFT | RIGHT | REPORT | FLIP
    PLACE <x>,<y>,<HEADING>
"""

import re
from typing import Iterable, List, Optional

from bot_box.core.commands.types import (
    Command,
    Flip,
    Heading,
    Move,
    Place,
    Report,
    TurnLeft,
    TurnRight,
)

PLACE_PREFIX = "PLACE "

SIMPLE_COMMANDS = {
    "MOVE": Move(),
    "LEFT": TurnLeft(),
    "RIGHT": TurnRight(),
    "REPORT": Report(),
    "FLIP": Flip(),
}

_NON_NEGATIVE_INT = re.compile(r"[0-9]+")


def parse(line: Optional[str]) -> Optional[Command]:
    """
    Parse one instruction line.

    Args:
        line: Single instruction, normally already stripped by the reader

    Returns:
        The Command, or None when the line is not a valid instruction

    Example:
        >>> parse("PLACE 1,2,NORTH")
        Place(x=1, y=2, heading=<Heading.NORTH: 'NORTH'>)
        >>> parse("PLACE 1,2,north") is None
        True
    """
    if line is None or not line.strip():
        return None

    if line in SIMPLE_COMMANDS:
        return SIMPLE_COMMANDS[line]

    if line.startswith(PLACE_PREFIX):
        return _parse_place(line[len(PLACE_PREFIX):])

    return None


def parse_lines(lines: Iterable[str]) -> List[Command]:
    """Parse many lines, keeping valid commands in order and dropping the rest."""
    commands = []
    for line in lines:
        command = parse(line)
        if command is not None:
            commands.append(command)
    return commands


def _parse_place(arguments: str) -> Optional[Place]:
    """Parse "<x>,<y>,<HEADING>"; whitespace around each field is ignored."""
    fields = [field.strip() for field in arguments.split(",")]
    if len(fields) != 3:
        return None

    raw_x, raw_y, raw_heading = fields
    x = _parse_non_negative_int(raw_x)
    y = _parse_non_negative_int(raw_y)
    if x is None or y is None:
        return None

    heading = _parse_heading(raw_heading)
    if heading is None:
        return None

    return Place(x, y, heading)


def _parse_non_negative_int(raw: str) -> Optional[int]:
    # ASCII digits only: no sign, no decimal point, no underscores
    if not _NON_NEGATIVE_INT.fullmatch(raw):
        return None
    return int(raw)


def _parse_heading(raw: str) -> Optional[Heading]:
    try:
        return Heading(raw)
    except ValueError:
        return None
