"""
Cursor mode for Minesweeper.

The player moves a cursor over the board with h/j/k/l and opens or
flags the cell under it with o/f. Ctrl-C quits at once.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .game import Command, GameSession
from .render import X_OFFSET, Y_OFFSET, render_board
from .terminal import CTRL_C, Terminal


# ============================================================================
# Constants
# ============================================================================

KEY_MOVES: Dict[str, Tuple[int, int]] = {
    "h": (0, -1),
    "j": (1, 0),
    "k": (-1, 0),
    "l": (0, 1),
}

KEY_COMMANDS: Dict[str, Command] = {
    "o": Command.OPEN,
    "f": Command.FLAG,
}

# Empty string is end of input
QUIT_KEYS = (CTRL_C, "")

RETRY_PROMPT = "Try again? [Y/N]"


# ============================================================================
# Cursor
# ============================================================================

@dataclass
class Cursor:
    """Selected cell, kept inside a rows x cols board (0-based)."""

    rows: int
    cols: int
    row: int = 0
    col: int = 0

    def move(self, delta_row: int, delta_col: int) -> None:
        self.row = min(max(self.row + delta_row, 0), self.rows - 1)
        self.col = min(max(self.col + delta_col, 0), self.cols - 1)

    @property
    def screen_position(self) -> Tuple[int, int]:
        """0-based screen (row, col) of the cell under the cursor."""
        return self.row + 1 + Y_OFFSET, self.col + 1 + X_OFFSET


# ============================================================================
# Game Loop
# ============================================================================

def handle_key(session: GameSession, cursor: Cursor, key: str) -> None:
    """Apply one key press to the cursor or the board."""
    if key in KEY_MOVES:
        cursor.move(*KEY_MOVES[key])
    elif key in KEY_COMMANDS:
        session.apply(KEY_COMMANDS[key], cursor.row, cursor.col)


def play_round(
    session: GameSession, cursor: Cursor, terminal: Terminal
) -> bool:
    """
    Play one round until it is won or lost.

    Returns:
        False if the player quit in the middle of the round.
    """
    session.new_round()
    while session.is_playing:
        terminal.clear()
        terminal.write(render_board(session.board))
        terminal.move(*cursor.screen_position)
        key = terminal.getch()
        if key in QUIT_KEYS:
            return False
        handle_key(session, cursor, key)

    terminal.move(0, 0)
    terminal.write(render_board(session.board))
    terminal.write(session.result_message() + "\n\n")
    terminal.write(RETRY_PROMPT)
    return True


def run_cursor_mode(
    session: GameSession,
    terminal: Terminal,
    cursor: Optional[Cursor] = None,
) -> None:
    """
    Play rounds in cursor mode until the player quits or declines a retry.

    The cursor keeps its position from one round to the next.

    Args:
        session: Game session to play.
        terminal: Terminal in cbreak mode to read keys from and draw on.
        cursor: Starting cursor; defaults to the top-left cell.
    """
    if cursor is None:
        cursor = Cursor(session.board.rows, session.board.cols)
    while play_round(session, cursor, terminal):
        if terminal.getch() in ("n", "N") + QUIT_KEYS:
            break
    terminal.write("\n")
