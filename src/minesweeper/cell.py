"""
Cell module for Minesweeper game.

A read-only snapshot of one grid position combining the Board's static
data with its revealed/hidden state.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index.
        col: Column index.
        is_mine: Whether this cell contains a mine.
        count: Mines in neighboring cells (0-8), or -1 for a mine.
        state: Hidden or revealed.
    """

    row: int
    col: int
    is_mine: bool = False
    count: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def symbol(self) -> str:
        """Two-character board rendering of this cell."""
        if self.is_hidden:
            return ". "
        if self.is_mine:
            return "* "
        return f"{self.count} "

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_hidden:
            return -1
        if self.is_mine:
            return 9
        return self.count
