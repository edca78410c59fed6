"""
Prompt mode for Minesweeper.

The player types a command (open or flag) and then a coordinate such as
``c7`` or ``B12``: one letter for the column followed by a one- or
two-digit row number.
"""
import re
import sys
from typing import Callable, Optional, TextIO, Tuple

from .game import Command, GameSession
from .render import COLUMN_LETTERS, render_board


# ============================================================================
# Constants
# ============================================================================

COMMAND_PROMPT = "command? [open|flag] > "
WHERE_PROMPT = "where? > "
RETRY_PROMPT = "Try again? [Y/N]"
QUIT = "quit"

COMMANDS = {
    "open": Command.OPEN,
    "flag": Command.FLAG,
}

_COORDINATE_RE = re.compile(r"([a-zA-Z])([0-9]{1,2})")

InputFn = Callable[[str], str]


# ============================================================================
# Parsing
# ============================================================================

def parse_command(text: str) -> Optional[Command]:
    """Parse a command token, or return None if it is not one."""
    return COMMANDS.get(text.strip())


def parse_coordinate(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a coordinate token into a 0-based (row, col) position.

    The column letter is case-sensitive: a-z name columns 1-26 and A-Z
    columns 27-52. Positions outside the current board are still returned;
    board actions on them are no-ops.

    Args:
        text: Raw input line.

    Returns:
        (row, col) tuple, or None if the text is not a coordinate.
    """
    match = _COORDINATE_RE.fullmatch(text.strip())
    if match is None:
        return None
    letter, digits = match.groups()
    return int(digits) - 1, COLUMN_LETTERS.index(letter)


def _ask(input_fn: InputFn, prompt: str) -> Optional[str]:
    """Read one line, or None at end of input."""
    try:
        return input_fn(prompt)
    except EOFError:
        return None


# ============================================================================
# Game Loop
# ============================================================================

def _read_command(
    session: GameSession, input_fn: InputFn, out: TextIO
) -> Optional[Command]:
    """Show the board and ask until a valid command is entered."""
    while True:
        out.write(render_board(session.board))
        line = _ask(input_fn, COMMAND_PROMPT)
        if line is None:
            return None
        command = parse_command(line)
        if command is not None:
            return command


def _read_coordinate(input_fn: InputFn) -> Optional[Tuple[int, int]]:
    """Ask until a valid coordinate is entered; None means quit."""
    while True:
        line = _ask(input_fn, WHERE_PROMPT)
        if line is None or line.strip() == QUIT:
            return None
        position = parse_coordinate(line)
        if position is not None:
            return position


def play_round(
    session: GameSession, input_fn: InputFn, out: TextIO
) -> bool:
    """
    Play one round until it is won or lost.

    Returns:
        False if the player quit in the middle of the round.
    """
    session.new_round()
    while session.is_playing:
        command = _read_command(session, input_fn, out)
        if command is None:
            return False
        position = _read_coordinate(input_fn)
        if position is None:
            return False
        session.apply(command, *position)

    out.write(render_board(session.board))
    print(session.result_message(), file=out)
    print(file=out)
    return True


def run_prompt_mode(
    session: GameSession,
    input_fn: Optional[InputFn] = None,
    out: Optional[TextIO] = None,
) -> None:
    """
    Play rounds in prompt mode until the player quits or declines a retry.

    Args:
        session: Game session to play.
        input_fn: Reads one line after showing a prompt; defaults to input().
        out: Stream for the board and messages; defaults to stdout.
    """
    if input_fn is None:
        input_fn = input
    if out is None:
        out = sys.stdout
    while play_round(session, input_fn, out):
        answer = _ask(input_fn, RETRY_PROMPT)
        if answer is None or answer.strip() in ("n", "N"):
            return
