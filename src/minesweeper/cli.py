"""
Command-line interface for Minesweeper.

Usage:
    minesweeper [-r ROWS] [-c COLUMNS] [-n N_MINE] [-l LEVEL] [-m MODE]
"""
import argparse
import sys
from typing import List, Optional

import numpy as np

from .board import LEVELS, Board, BoardConfig
from .cursor import run_cursor_mode
from .game import GameSession
from .prompt import run_prompt_mode
from .terminal import Terminal


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 4
MAX_SIZE = 52

DEFAULT_ROWS = 9
DEFAULT_COLS = 9
DEFAULT_MINES = 10

MODES = ("cursor", "prompt")

EPILOG = """\
levels:
  easy    10 rows, 10 columns, 10 mines
  normal  16 rows, 16 columns, 40 mines
  hard    16 rows, 30 columns, 99 mines

cursor mode keys:
  h/j/k/l  move cursor left/down/up/right
  o        open the panel under the cursor
  f        flag the panel under the cursor
  Ctrl-C   quit

prompt mode:
  enter a command (open or flag), then a coordinate such as c7:
  a column letter (a-z, then A-Z) followed by a row number.
  enter quit as the coordinate to leave.
"""


# ============================================================================
# Argument Parsing
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Minesweeper in the terminal",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r", "--row", type=int, default=None, help="Row size"
    )
    parser.add_argument(
        "-c", "--column", type=int, default=None, help="Column size"
    )
    parser.add_argument(
        "-n", "--n-mine", type=int, default=None, help="Number of mines"
    )
    parser.add_argument(
        "-l",
        "--level",
        choices=sorted(LEVELS),
        default=None,
        help="Preset board size and mine count",
    )
    parser.add_argument(
        "-m", "--mode", choices=MODES, default="cursor", help="Input mode"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    return parser


def config_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """
    Resolve the board configuration from parsed arguments.

    A level sets all three values; explicit sizes and mine counts
    override it. Invalid values end the program through parser.error().
    """
    if args.level is not None:
        level = LEVELS[args.level]
        rows, cols, mines = level.rows, level.cols, level.num_mines
    else:
        rows, cols, mines = DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_MINES
    if args.row is not None:
        rows = args.row
    if args.column is not None:
        cols = args.column
    if args.n_mine is not None:
        mines = args.n_mine

    if rows > MAX_SIZE:
        parser.error(f"Row size must be at most {MAX_SIZE}")
    if rows < MIN_SIZE:
        parser.error(f"Row size must be at least {MIN_SIZE}")
    if cols > MAX_SIZE:
        parser.error(f"Column size must be at most {MAX_SIZE}")
    if cols < MIN_SIZE:
        parser.error(f"Column size must be at least {MIN_SIZE}")
    if mines >= rows * cols:
        parser.error("Too many mines!")

    try:
        return BoardConfig(rows, cols, mines)
    except ValueError as error:
        parser.error(str(error))


# ============================================================================
# Entry Point
# ============================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and play in the chosen mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(parser, args)

    board = Board(config, rng=np.random.default_rng(args.seed))
    session = GameSession(board)

    print("Start Minesweeper")
    try:
        if args.mode == "cursor":
            with Terminal() as terminal:
                run_cursor_mode(session, terminal)
        else:
            run_prompt_mode(session)
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
