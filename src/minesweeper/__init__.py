"""
Minesweeper game module.

Provides the board engine (mine layout, neighbor counts, flood reveal)
and the interactive text session that drives it.
"""
from .errors import (
    MinesweeperError,
    InvalidConfiguration,
    InvalidCoordinate,
    MalformedInput,
)
from .config import BoardConfig, EASY, MEDIUM, HARD, PRESETS
from .cell import Cell, CellState
from .board import Board, MINE
from .reveal_state import RevealState, GameState
from .render import render_board, print_board
from .session import Session, TokenReader

__all__ = [
    "MinesweeperError",
    "InvalidConfiguration",
    "InvalidCoordinate",
    "MalformedInput",
    "BoardConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "Cell",
    "CellState",
    "Board",
    "MINE",
    "RevealState",
    "GameState",
    "render_board",
    "print_board",
    "Session",
    "TokenReader",
]
