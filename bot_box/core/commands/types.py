# IN THIS FILE: HEADING, COMMAND VARIANTS

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Heading(Enum):
    """
    Robot facing direction on the table top.
    Value is the literal token used in instructions and reports.
    """
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    def left(self) -> "Heading":
        """Rotate 90 degrees counter-clockwise."""
        return _LEFT_OF[self]

    def right(self) -> "Heading":
        """Rotate 90 degrees clockwise."""
        return _RIGHT_OF[self]

    def flip(self) -> "Heading":
        """Rotate 180 degrees."""
        return _OPPOSITE_OF[self]

    @property
    def step(self) -> Tuple[int, int]:
        """Unit (dx, dy) for one move forward."""
        return _STEP_OF[self]

    def __str__(self) -> str:
        return self.value


_LEFT_OF = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}

_RIGHT_OF = {
    Heading.NORTH: Heading.EAST,
    Heading.EAST: Heading.SOUTH,
    Heading.SOUTH: Heading.WEST,
    Heading.WEST: Heading.NORTH,
}

_OPPOSITE_OF = {
    Heading.NORTH: Heading.SOUTH,
    Heading.SOUTH: Heading.NORTH,
    Heading.EAST: Heading.WEST,
    Heading.WEST: Heading.EAST,
}

_STEP_OF = {
    Heading.NORTH: (0, 1),
    Heading.SOUTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Place:
    """Put the robot at (x, y) facing heading. Coordinates are already non-negative."""
    x: int
    y: int
    heading: Heading

    def __str__(self) -> str:
        return f"PLACE {self.x},{self.y},{self.heading}"


@dataclass(frozen=True)
class Move:
    def __str__(self) -> str:
        return "MOVE"


@dataclass(frozen=True)
class TurnLeft:
    def __str__(self) -> str:
        return "LEFT"


@dataclass(frozen=True)
class TurnRight:
    def __str__(self) -> str:
        return "RIGHT"


@dataclass(frozen=True)
class Flip:
    def __str__(self) -> str:
        return "FLIP"


@dataclass(frozen=True)
class Report:
    def __str__(self) -> str:
        return "REPORT"


Command = Union[Place, Move, TurnLeft, TurnRight, Flip, Report]
