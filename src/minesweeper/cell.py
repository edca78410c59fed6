"""
Cell module for Minesweeper.

Represents individual cells on the game board: what they hold (a mine or
an empty square with its adjacent mine count) and whether they are
revealed or flagged.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union


# ============================================================================
# Cell Content
# ============================================================================

MAX_ADJACENT_MINES = 8


@dataclass(frozen=True)
class Mine:
    """Content of a cell holding a mine."""


@dataclass(frozen=True)
class Empty:
    """
    Content of a cell without a mine.

    Attributes:
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    adjacent_mines: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_mines <= MAX_ADJACENT_MINES:
            raise ValueError(
                f"Adjacent mine count must be in 0..{MAX_ADJACENT_MINES}, "
                f"got {self.adjacent_mines}"
            )


CellKind = Union[Mine, Empty]


class CellState(Enum):
    """What a cell shows to the player."""

    HIDDEN = auto()
    FLAGGED = auto()
    MINE = auto()
    EMPTY = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        kind: Mine or Empty with its adjacent mine count.
        revealed: Whether the cell has been opened.
        flagged: Whether the player marked the hidden cell.
    """

    kind: CellKind = field(default_factory=Empty)
    revealed: bool = False
    flagged: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.revealed or self.flagged:
            return False
        self.revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.revealed:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return isinstance(self.kind, Mine)

    @property
    def adjacent_mines(self) -> Optional[int]:
        """Adjacent mine count, or None for a mine."""
        if isinstance(self.kind, Empty):
            return self.kind.adjacent_mines
        return None

    @property
    def state(self) -> CellState:
        """Classify the cell for display."""
        if not self.revealed:
            return CellState.FLAGGED if self.flagged else CellState.HIDDEN
        if self.is_mine:
            return CellState.MINE
        return CellState.EMPTY
