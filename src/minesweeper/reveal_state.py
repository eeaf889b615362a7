"""
Revealed/hidden state of a game and the flood reveal.
"""
from collections import deque
from enum import Enum, auto
from typing import List, Tuple

import numpy as np

from .board import Board, NEIGHBOR_OFFSETS
from .cell import Cell, CellState
from .errors import InvalidCoordinate


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# RevealState Class
# ============================================================================

class RevealState:
    """
    Per-cell revealed bitmap over a Board.

    Cells only ever go from hidden to revealed. Revealing a safe cell
    floods outward through zero-count cells using an explicit worklist,
    so large empty regions never hit the recursion limit.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._revealed = np.zeros(board.shape, dtype=bool)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Reveal a cell at the given position.

        A mine reveals only itself. A safe cell reveals itself and, if its
        count is zero, floods into its neighbors. Revealing an already
        revealed cell is a no-op.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Positions newly revealed by this call, in reveal order.

        Raises:
            InvalidCoordinate: If (row, col) is off the board.
        """
        self._check_position(row, col)

        if self.board.is_mine(row, col):
            if self._revealed[row, col]:
                return []
            self._revealed[row, col] = True
            return [(row, col)]

        return self._flood_reveal(row, col)

    def _flood_reveal(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Reveal the zero-count region seeded at a safe cell plus its border."""
        newly_revealed = []
        worklist = deque([(row, col)])
        while worklist:
            current_row, current_col = worklist.pop()
            if self._revealed[current_row, current_col]:
                continue
            self._revealed[current_row, current_col] = True
            newly_revealed.append((current_row, current_col))
            if self.board.count(current_row, current_col) != 0:
                continue
            for delta_row, delta_col in NEIGHBOR_OFFSETS:
                next_row = current_row + delta_row
                next_col = current_col + delta_col
                if (
                    self.board.in_bounds(next_row, next_col)
                    and not self._revealed[next_row, next_col]
                ):
                    worklist.append((next_row, next_col))
        return newly_revealed

    def _check_position(self, row: int, col: int) -> None:
        if not self.board.in_bounds(row, col):
            raise InvalidCoordinate(row, col, self.board.rows, self.board.cols)

    # ========================================================================
    # State Accessors
    # ========================================================================

    def is_game_over(self) -> bool:
        """True iff a mine has been revealed."""
        return bool(np.any(self._revealed & self.board.mines))

    def is_game_won(self) -> bool:
        """True iff every safe cell has been revealed."""
        return bool(np.all(self._revealed | self.board.mines))

    @property
    def game_state(self) -> GameState:
        """Current game state; a won board is reported as won."""
        if self.is_game_won():
            return GameState.WON
        if self.is_game_over():
            return GameState.LOST
        return GameState.PLAYING

    def is_revealed(self, row: int, col: int) -> bool:
        self._check_position(row, col)
        return bool(self._revealed[row, col])

    @property
    def revealed_count(self) -> int:
        return int(np.count_nonzero(self._revealed))

    def get_cell(self, row: int, col: int) -> Cell:
        """Snapshot of the cell at a position."""
        self._check_position(row, col)
        return Cell(
            row=row,
            col=col,
            is_mine=self.board.is_mine(row, col),
            count=self.board.count(row, col),
            state=(
                CellState.REVEALED if self._revealed[row, col]
                else CellState.HIDDEN
            ),
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.where(self._revealed, self.board.counts, -1).astype(np.int8)
        obs[self._revealed & self.board.mines] = 9
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """Hidden cells that can still be revealed, in row-major order."""
        return [
            (int(row), int(col)) for row, col in np.argwhere(~self._revealed)
        ]
