"""
Text rendering of a Minesweeper board.

Draws a labeled grid: row numbers down the left, column letters across
the top (a-z for the first 26 columns, then A-Z), one glyph per cell.
"""
import string
from typing import List

from .board import Board
from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

GLYPH_FLAG = "*"
GLYPH_HIDDEN = "o"
GLYPH_ZERO = "."
GLYPH_MINE = "@"

COLUMN_LETTERS = string.ascii_lowercase + string.ascii_uppercase

# Screen offset of cell (1, 1) from the top-left corner of the drawn board
Y_OFFSET = 3
X_OFFSET = 2


# ============================================================================
# Rendering
# ============================================================================

def column_label(col: int) -> str:
    """Letter naming a 0-based column index."""
    return COLUMN_LETTERS[col]


def cell_glyph(cell: Cell) -> str:
    """Single character shown for a cell."""
    state = cell.state
    if state == CellState.FLAGGED:
        return GLYPH_FLAG
    if state == CellState.HIDDEN:
        return GLYPH_HIDDEN
    if state == CellState.MINE:
        return GLYPH_MINE
    if cell.adjacent_mines == 0:
        return GLYPH_ZERO
    return str(cell.adjacent_mines)


def render_board(board: Board) -> str:
    """
    Render the board as text.

    Args:
        board: Board to draw.

    Returns:
        Two blank lines, the column labels, a separator, one line per row
        and a trailing blank line.
    """
    lines: List[str] = ["", ""]
    lines.append("  |" + "".join(column_label(col) for col in range(board.cols)))
    lines.append("--+" + "-" * board.cols)
    for row in range(board.rows):
        glyphs = "".join(
            cell_glyph(board.get_cell(row, col)) for col in range(board.cols)
        )
        lines.append(f"{row + 1:2d}|{glyphs}")
    lines.append("")
    return "\n".join(lines) + "\n"
