"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession, Mine


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible boards."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a populated default 9x9 board with 10 mines."""
    board = Board(BoardConfig(9, 9, 10), rng=rng)
    board.reset()
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """4x4 board with its single mine at (0, 0)."""
    board = Board(BoardConfig(4, 4, 1))
    board.reset(mine_positions=[(0, 0)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    board = Board(BoardConfig(5, 5, 0))
    board.reset()
    return board


@pytest.fixture
def session(corner_mine_board: Board, monkeypatch) -> GameSession:
    """Game session whose rounds always use the corner-mine layout."""
    board = corner_mine_board
    original_reset = board.reset
    monkeypatch.setattr(
        board, "reset", lambda: original_reset(mine_positions=[(0, 0)])
    )
    return GameSession(board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=Mine())

