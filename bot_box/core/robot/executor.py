"""
Robot Execution Module
Feeds raw instruction lines through the parser and the robot in arrival order.

Rejections (unparseable lines, off-table or blocked moves, commands before
placement) are logged and dropped. Reports go to the output sink.
"""

import uuid
from typing import Callable, Iterable, List, Optional

from bot_box.core.commands.parser import parse
from bot_box.core.observability.logging import get_logger
from bot_box.core.robot.robot import Robot, RobotState, Transition
from bot_box.core.table.grid import Grid

logger = get_logger("executor")


class RobotExecutor:
    """
    Executes instruction lines against a single robot.

    One executor is one simulation session: it owns the robot, shares the grid
    read-only, and tags every log entry with its session_id.
    """

    def __init__(
        self,
        grid: Grid,
        output: Callable[[str], None] = print,
        session_id: Optional[str] = None
    ):
        self.grid = grid
        self.robot = Robot(grid)
        self.output = output
        self.session_id = session_id or str(uuid.uuid4())

        logger.info("RobotExecutor initialized",
                   session_id=self.session_id,
                   length=grid.length,
                   width=grid.width,
                   obstacles=len(grid.obstacles))

    @property
    def state(self) -> RobotState:
        return self.robot.state

    def execute(self, line: str) -> Optional[Transition]:
        """
        Execute one raw instruction line.

        Returns:
            The Transition, or None when the line did not parse
        """
        logger.debug("Executing command", session_id=self.session_id, line=line)

        command = parse(line)
        if command is None:
            logger.warning("Invalid command", session_id=self.session_id, line=line)
            return None

        transition = self.robot.apply_command(command)

        if not transition.applied:
            logger.warning("Command rejected",
                          session_id=self.session_id,
                          command=str(command),
                          **transition.to_dict())
            return transition

        logger.info("Command applied",
                   session_id=self.session_id,
                   command=str(command),
                   position=str(self.robot.position),
                   **transition.to_dict())

        if transition.report is not None:
            self.output(str(transition.report))

        return transition

    def execute_lines(self, lines: Iterable[str]) -> List[str]:
        """Execute lines in order and return every report emitted."""
        reports = []
        executed = 0
        for line in lines:
            transition = self.execute(line)
            executed += 1
            if transition is not None and transition.report is not None:
                reports.append(str(transition.report))

        logger.info("Execution completed",
                   session_id=self.session_id,
                   lines=executed,
                   reports=len(reports))
        return reports

    def close(self) -> None:
        """End the session: write its grouped run log, if file logging is on."""
        logger.end_session(self.session_id)
