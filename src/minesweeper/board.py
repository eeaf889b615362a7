"""
Board module for Minesweeper game.

Holds the static mine layout and the precomputed neighbor counts.
A Board never changes after construction; the per-game revealed state
lives in RevealState.
"""
from typing import Any, List, Optional, Tuple

import numpy as np

from .config import BoardConfig


# ============================================================================
# Constants
# ============================================================================

MINE = -1

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


def _resolve_rng(rng: Any) -> Any:
    """Turn None or an integer seed into a numpy Generator."""
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper mine layout.

    Mines are placed by drawing uniform (row, col) pairs and retrying on
    collisions until exactly ``num_mines`` distinct cells are mined. Each
    safe cell stores the number of mines in its Moore neighborhood; mine
    cells store ``MINE`` (-1).
    """

    def __init__(self, config: Optional[BoardConfig] = None, rng: Any = None) -> None:
        """
        Build the board.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: None, an integer seed, or an object with numpy's
                ``Generator.integers(low, high)`` interface. It is only
                used during construction.
        """
        self.config = config or BoardConfig()
        self._mines = self._place_mines(_resolve_rng(rng))
        self._counts = self._calculate_counts(self._mines)
        self._mines.setflags(write=False)
        self._counts.setflags(write=False)

    # ========================================================================
    # Construction (Low-level)
    # ========================================================================

    def _place_mines(self, rng: Any) -> np.ndarray:
        """Mark ``num_mines`` distinct cells, retrying on collisions."""
        mines = np.zeros((self.rows, self.cols), dtype=bool)
        placed = 0
        while placed < self.config.num_mines:
            row = int(rng.integers(0, self.rows))
            col = int(rng.integers(0, self.cols))
            if not mines[row, col]:
                mines[row, col] = True
                placed += 1
        return mines

    @staticmethod
    def _calculate_counts(mines: np.ndarray) -> np.ndarray:
        """Sum the eight shifted neighbor views of the padded mine grid."""
        rows, cols = mines.shape
        padded = np.pad(mines.astype(np.int8), 1)
        counts = np.zeros((rows, cols), dtype=np.int8)
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            counts += padded[
                1 + delta_row:1 + delta_row + rows,
                1 + delta_col:1 + delta_col + cols,
            ]
        counts[mines] = MINE
        return counts

    # ========================================================================
    # Geometry
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
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds Moore neighbors of a cell, excluding the cell itself.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples.
        """
        return [
            (row + delta_row, col + delta_col)
            for delta_row, delta_col in NEIGHBOR_OFFSETS
            if self.in_bounds(row + delta_row, col + delta_col)
        ]

    # ========================================================================
    # Static Cell Data
    # ========================================================================

    def is_mine(self, row: int, col: int) -> bool:
        return bool(self._mines[row, col])

    def count(self, row: int, col: int) -> int:
        """Neighbor mine count, or -1 for a mine."""
        return int(self._counts[row, col])

    @property
    def mines(self) -> np.ndarray:
        """Read-only boolean mine layout."""
        return self._mines

    @property
    def counts(self) -> np.ndarray:
        """Read-only int8 count grid."""
        return self._counts

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Mine coordinates in row-major order."""
        return [(int(row), int(col)) for row, col in np.argwhere(self._mines)]

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.rows}, cols={self.cols}, "
            f"num_mines={self.num_mines})"
        )
