"""
Board module for Minesweeper.

Implements the game board with mine placement, adjacency counts,
cell opening (with flood fill), flagging and the cleared check.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, Empty, Mine


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
EASY = BoardConfig(10, 10, 10)
NORMAL = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

LEVELS = {
    "easy": EASY,
    "normal": NORMAL,
    "hard": HARD,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    A new board is all hidden and holds no mines; call reset() to place
    mines for a round. Coordinates are 0-based (row, col). Actions on
    positions outside the board, or on cells they cannot affect, are
    silent no-ops that return False.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of hidden, mine-free cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _shuffled_layout(self) -> List[bool]:
        """
        Shuffle num_mines mines over the flat cell index space.

        Fisher-Yates: for i = n-1 down to 1 swap slot i with a slot drawn
        uniformly from [0, i].

        Returns:
            Flat list where True marks a mine, indexed row * cols + col.
        """
        layout = [index < self.config.num_mines
                  for index in range(self.config.total_cells)]
        for i in range(len(layout) - 1, 0, -1):
            j = int(self.rng.integers(0, i + 1))
            layout[i], layout[j] = layout[j], layout[i]
        return layout

    def _layout_from_positions(
        self, positions: Iterable[Tuple[int, int]]
    ) -> List[bool]:
        """Build a flat mine layout from explicit (row, col) positions."""
        layout = [False] * self.config.total_cells
        count = 0
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position out of range: ({row}, {col})")
            index = row * self.config.cols + col
            if layout[index]:
                raise ValueError(f"Duplicate mine position: ({row}, {col})")
            layout[index] = True
            count += 1
        if count != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, got {count}"
            )
        return layout

    def _place_mines(self, layout: List[bool]) -> None:
        """Set every cell's kind from a flat mine layout."""
        for index, is_mine in enumerate(layout):
            if is_mine:
                row, col = divmod(index, self.config.cols)
                self._grid[row][col].kind = Mine()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    cell.kind = Empty(self._count_adjacent_mines(row, col))

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 in-range neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reset(
        self, mine_positions: Optional[Iterable[Tuple[int, int]]] = None
    ) -> None:
        """
        Repopulate the board for a new round.

        Every cell is hidden and unflagged again, mines are placed and
        adjacency counts recomputed.

        Args:
            mine_positions: Exact (row, col) mine positions to use instead
                of a random shuffle. Must name num_mines distinct cells.

        Raises:
            ValueError: If mine_positions is not a valid layout.
        """
        if mine_positions is None:
            layout = self._shuffled_layout()
        else:
            layout = self._layout_from_positions(mine_positions)
        self._init_grid()
        self._place_mines(layout)
        self._calculate_adjacent_mines()

    def open(self, row: int, col: int) -> bool:
        """
        Open the cell at the given position.

        A revealed mine ends there; the caller inspects the cell to detect
        the loss. A cell with no adjacent mines opens its neighbors too,
        spreading through the whole zero region and its numbered border.
        Flagged cells are never opened, neither directly nor by the flood.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            True if at least one cell was revealed, False otherwise.
        """
        if not self._is_valid_position(row, col):
            return False

        opened = False
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            opened = True
            if cell.adjacent_mines == 0:
                stack.extend(self._get_neighbors(current_row, current_col))
        return opened

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    def is_cleared(self) -> bool:
        """
        Check if every non-mine cell is revealed.

        Flags do not count: a flagged safe cell still has to be unflagged
        and opened.
        """
        return bool(np.all(self.revealed_mask() | self.mine_mask()))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return int(np.count_nonzero(self.revealed_mask()))

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def _mask(self, attribute: str) -> np.ndarray:
        """Boolean (rows, cols) array of a cell attribute."""
        return np.array(
            [[getattr(cell, attribute) for cell in row] for row in self._grid],
            dtype=bool,
        ).reshape(self.config.rows, self.config.cols)

    def mine_mask(self) -> np.ndarray:
        """Boolean array marking mines."""
        return self._mask("is_mine")

    def revealed_mask(self) -> np.ndarray:
        """Boolean array marking revealed cells."""
        return self._mask("revealed")

    def flagged_mask(self) -> np.ndarray:
        """Boolean array marking flagged cells."""
        return self._mask("flagged")
