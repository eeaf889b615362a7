"""
Text rendering of a game board.
"""
import sys
from typing import Optional, TextIO

from .reveal_state import RevealState


def render_board(state: RevealState) -> str:
    """
    Render board as text.

    The header holds two spaces and then each column index followed by a
    space. Each row holds its index, a space, and one two-character
    symbol per cell: ". " hidden, "* " revealed mine, "<count> " revealed
    safe cell. Indices are not padded.
    """
    rows, cols = state.board.shape
    lines = ["  " + "".join(f"{col} " for col in range(cols))]
    for row in range(rows):
        symbols = "".join(state.get_cell(row, col).symbol for col in range(cols))
        lines.append(f"{row} {symbols}")
    return "\n".join(lines) + "\n"


def print_board(state: RevealState, out: Optional[TextIO] = None) -> None:
    """Write the rendered board to a stream (default: stdout)."""
    if out is None:
        out = sys.stdout
    out.write(render_board(state))
