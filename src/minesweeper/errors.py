"""
Exceptions raised by the Minesweeper engine and session.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count are out of range."""


class InvalidCoordinate(MinesweeperError, IndexError):
    """A cell coordinate lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Cell ({row}, {col}) is outside the board "
            f"(rows 0-{rows - 1}, columns 0-{cols - 1})"
        )


class MalformedInput(MinesweeperError):
    """Input stream ended early or held a non-integer token."""
