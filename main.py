"""
BotBox Table-Top Robot Simulator
Entry point for batch and interactive CLI sessions.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bot-box",
        description="Drive a robot around a table top with PLACE/MOVE/LEFT/RIGHT/FLIP/REPORT.",
    )
    parser.add_argument(
        "command_file",
        nargs="?",
        help="Instruction file (no extension). Omit for an interactive session.",
    )
    parser.add_argument(
        "--board-size",
        default=None,
        help="Table size as 'length,width' (default: $BOT_BOX_BOARD_SIZE or 5,5)",
    )
    parser.add_argument(
        "--layout",
        default=None,
        help="YAML table layout with obstacles (default: $BOT_BOX_LAYOUT)",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the simulator.
    Loads configuration and starts a file or interactive session.
    """

    # Load environment configuration
    env_path = Path(__file__).parent / ".env"
    load_dotenv(dotenv_path=env_path)

    args = build_parser().parse_args(argv)

    try:
        # Import after .env loaded (modules read env vars on import)
        from bot_box.cli.interface import run_cli_session, run_file_session
        from bot_box.core.table.layout import build_grid

        grid = build_grid(board_size=args.board_size, layout_file=args.layout)
        if args.command_file:
            run_file_session(args.command_file, grid)
        else:
            run_cli_session(grid)
    except KeyboardInterrupt:
        print("\nShutting down gracefully...")
        sys.exit(0)
    except ValueError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
