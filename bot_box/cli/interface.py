"""
CLI Interface
Batch and interactive sessions driving one robot on one table top.
"""

import sys
from typing import Callable, List

from bot_box.core.instructions.command_file import load_command_file
from bot_box.core.observability.logging import get_logger
from bot_box.core.robot.executor import RobotExecutor
from bot_box.core.table.grid import Grid

logger = get_logger("cli")

EXIT_WORDS = {"exit", "quit", "q"}
PROMPT = "robot> "


def print_banner(grid: Grid):
    """Display interactive session banner."""
    print("\n" + "=" * 60)
    print("  BOTBOX TABLE-TOP ROBOT")
    print(f"  Table {grid.length}x{grid.width}, {len(grid.obstacles)} obstacle(s)")
    print("=" * 60 + "\n")


def run_file_session(command_file: str, grid: Grid) -> List[str]:
    """
    Run every instruction from a command file.

    Reports are printed to stdout as they are produced.

    Returns:
        The reports, in order
    """
    commands = load_command_file(command_file)

    executor = RobotExecutor(grid)
    logger.info("File session started", session_id=executor.session_id, command_file=command_file)

    try:
        return executor.execute_lines(commands)
    finally:
        sys.stdout.flush()
        logger.info("File session ended", session_id=executor.session_id)
        executor.close()


def run_cli_session(grid: Grid, read_line: Callable[[str], str] = input) -> RobotExecutor:
    """
    Interactive loop: one instruction per prompt.

    Process:
    1. Prompt for an instruction
    2. Execute it against the robot
    3. Repeat until exit word, EOF or Ctrl+C
    """
    print_banner(grid)
    executor = RobotExecutor(grid)
    logger.info("CLI session started", session_id=executor.session_id)

    print("Instructions: PLACE X,Y,F | MOVE | LEFT | RIGHT | FLIP | REPORT")
    print("Type 'exit' or 'quit' to exit, Ctrl+C to interrupt\n")

    try:
        while True:
            try:
                line = read_line(PROMPT).strip()
            except EOFError:
                break

            if line.lower() in EXIT_WORDS:
                break

            if not line:
                continue

            executor.execute(line)

    except KeyboardInterrupt:
        print("\n")

    finally:
        print("Shutting down...")
        sys.stdout.flush()
        logger.info("CLI session ended", session_id=executor.session_id)
        executor.close()

    return executor
