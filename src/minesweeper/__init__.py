"""
Minesweeper game package.

Provides the board engine (cells, mine placement, opening and flagging),
a game session on top of it and the terminal front ends.
"""
from .cell import Cell, CellKind, CellState, Empty, Mine
from .board import Board, BoardConfig, EASY, NORMAL, HARD, LEVELS
from .game import Command, GameSession, GameState

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "Empty",
    "Mine",
    "Board",
    "BoardConfig",
    "EASY",
    "NORMAL",
    "HARD",
    "LEVELS",
    "Command",
    "GameSession",
    "GameState",
]
