"""
Robot State Machine
Placement state and the transition applied for each command.

States: Unplaced (initial) and Placed(x, y, heading). There is no way back to
Unplaced. Rejected commands never raise; they return a Transition carrying the
rejection reason and leave the state untouched. Logging is the caller's job,
see bot_box.core.robot.executor.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

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
from bot_box.core.table.grid import Grid


class RejectionReason(Enum):
    """Why a well-formed command had no effect."""

    NOT_PLACED = "not_placed"
    OFF_TABLE = "off_table"
    OBSTACLE = "obstacle"


@dataclass(frozen=True)
class Position:
    """Reported robot position."""

    x: int
    y: int
    heading: Heading

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.heading}"


@dataclass(frozen=True)
class RobotState:
    """
    Snapshot of the robot.

    placed is True iff x, y and heading are all set to an open cell.
    """

    placed: bool = False
    x: Optional[int] = None
    y: Optional[int] = None
    heading: Optional[Heading] = None

    @property
    def position(self) -> Optional[Position]:
        if not self.placed:
            return None
        return Position(self.x, self.y, self.heading)


@dataclass(frozen=True)
class Transition:
    """
    Outcome of applying one command.

    Attributes:
        applied: Whether the command took effect
        reason: Rejection reason when applied is False
        report: Position emitted by a successful Report
    """

    applied: bool
    reason: Optional[RejectionReason] = None
    report: Optional[Position] = None

    @classmethod
    def accepted(cls, report: Optional[Position] = None) -> "Transition":
        return cls(applied=True, report=report)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "Transition":
        return cls(applied=False, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "applied": self.applied,
            "reason": self.reason.value if self.reason else None,
            "report": str(self.report) if self.report else None,
        }


UNPLACED = RobotState()


def apply(state: RobotState, command: Command, grid: Grid) -> Tuple[RobotState, Transition]:
    """
    Apply one command to a robot state.

    Args:
        state: Current robot state (never modified)
        command: Parsed, well-formed command
        grid: Table top the robot lives on

    Returns:
        (new_state, transition). On rejection new_state is state itself.

    Example:
        >>> grid = Grid(5, 5)
        >>> state, _ = apply(UNPLACED, Place(1, 2, Heading.EAST), grid)
        >>> state, result = apply(state, Report(), grid)
        >>> str(result.report)
        '1,2,EAST'
    """
    if isinstance(command, Place):
        reason = _blocked(grid, command.x, command.y)
        if reason is not None:
            return state, Transition.rejected(reason)
        return RobotState(True, command.x, command.y, command.heading), Transition.accepted()

    if not state.placed:
        return state, Transition.rejected(RejectionReason.NOT_PLACED)

    if isinstance(command, Move):
        dx, dy = state.heading.step
        new_x, new_y = state.x + dx, state.y + dy
        reason = _blocked(grid, new_x, new_y)
        if reason is not None:
            return state, Transition.rejected(reason)
        return replace(state, x=new_x, y=new_y), Transition.accepted()

    if isinstance(command, TurnLeft):
        return replace(state, heading=state.heading.left()), Transition.accepted()

    if isinstance(command, TurnRight):
        return replace(state, heading=state.heading.right()), Transition.accepted()

    if isinstance(command, Flip):
        return replace(state, heading=state.heading.flip()), Transition.accepted()

    if isinstance(command, Report):
        return state, Transition.accepted(report=state.position)

    raise TypeError(f"Unknown command type: {type(command).__name__}")


def _blocked(grid: Grid, x: int, y: int) -> Optional[RejectionReason]:
    if grid.is_open(x, y):
        return None
    if not grid.contains(x, y):
        return RejectionReason.OFF_TABLE
    return RejectionReason.OBSTACLE


class Robot:
    """
    A robot on a table top.

    Holds the current RobotState and replaces it as commands are applied.

    Example:
        >>> robot = Robot(Grid(5, 5))
        >>> robot.apply_command(Move()).reason
        <RejectionReason.NOT_PLACED: 'not_placed'>
    """

    def __init__(self, grid: Grid, state: RobotState = UNPLACED):
        self.grid = grid
        self.state = state

    @property
    def placed(self) -> bool:
        return self.state.placed

    @property
    def position(self) -> Optional[Position]:
        return self.state.position

    def apply_command(self, command: Command) -> Transition:
        """Apply command, keep the resulting state and return the transition."""
        self.state, transition = apply(self.state, command, self.grid)
        return transition
