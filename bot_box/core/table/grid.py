"""
Table Top Grid
Immutable rectangle with a fixed set of point obstacles.

Obstacles outside the rectangle are accepted and simply never matched by a
reachable cell.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Rectangle of length (x-extent) by width (y-extent) cells."""

    length: int
    width: int
    obstacles: FrozenSet[Cell] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("length", "width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            if value <= 0:
                raise ValueError(f"{name} must be >= 1")
        # Normalise any iterable of pairs into a hashed set
        object.__setattr__(
            self, "obstacles", frozenset((int(x), int(y)) for x, y in self.obstacles)
        )

    @classmethod
    def with_obstacles(cls, length: int, width: int, obstacles: Iterable[Cell]) -> "Grid":
        return cls(length, width, frozenset(obstacles))

    def contains(self, x: int, y: int) -> bool:
        """True iff (x, y) lies on the table top."""
        return 0 <= x < self.length and 0 <= y < self.width

    def has_obstacle(self, x: int, y: int) -> bool:
        """True iff an obstacle sits exactly at (x, y)."""
        return (x, y) in self.obstacles

    def is_open(self, x: int, y: int) -> bool:
        """True iff the robot may stand on (x, y)."""
        return self.contains(x, y) and not self.has_obstacle(x, y)
