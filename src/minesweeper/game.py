"""
Game session for Minesweeper.

Drives one round of play over a Board: applies player commands and
decides whether the round is still running, won or lost.
"""
from dataclasses import dataclass
from enum import Enum, auto

from .board import Board
from .cell import CellState


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a round."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Command(Enum):
    """Player actions on a cell."""

    OPEN = auto()
    FLAG = auto()


WIN_MESSAGE = "Good job!!!  You've swept all the mines."
LOSE_MESSAGE = "Oops!!! You've hit a mine..."


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    A wrapper around Board that tracks the state of the current round.

    Attributes:
        board: Board played on; repopulated by every new_round().
        state: Current round state.
        moves_made: Commands applied during the current round.
    """

    board: Board
    state: GameState = GameState.PLAYING
    moves_made: int = 0

    def new_round(self) -> None:
        """Start a new round with freshly placed mines."""
        self.board.reset()
        self.state = GameState.PLAYING
        self.moves_made = 0

    def apply(self, command: Command, row: int, col: int) -> GameState:
        """
        Apply a command at (row, col) and update the round state.

        The round is lost when the acted-on cell is a revealed mine and
        won once every safe cell is revealed. Commands after the round
        has ended are ignored.

        Args:
            command: OPEN or FLAG.
            row: Row index.
            col: Column index.

        Returns:
            The round state after the command.
        """
        if self.state != GameState.PLAYING:
            return self.state

        if command == Command.OPEN:
            self.board.open(row, col)
        else:
            self.board.toggle_flag(row, col)
        self.moves_made += 1

        cell = self.board.get_cell(row, col)
        if cell is not None and cell.state == CellState.MINE:
            self.state = GameState.LOST
        elif self.board.is_cleared():
            self.state = GameState.WON
        return self.state

    @property
    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.state == GameState.LOST

    def result_message(self) -> str:
        """Message shown when the round is over."""
        return WIN_MESSAGE if self.is_won else LOSE_MESSAGE
