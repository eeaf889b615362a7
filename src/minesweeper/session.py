"""
Interactive text session.

Reads whitespace-separated integers from an input stream: rows, columns
and mine count, then (row, col) pairs to reveal until the game is won or
lost or the input runs out.
"""
import sys
from typing import Any, Iterator, Optional, TextIO

from .board import Board
from .config import BoardConfig, PRESETS
from .errors import InvalidConfiguration, InvalidCoordinate, MalformedInput
from .render import print_board
from .reveal_state import RevealState


WIN_MESSAGE = "Congratulations! You won the game!"
LOSS_MESSAGE = "You Lost! Game over."


# ============================================================================
# Input Tokens
# ============================================================================

class TokenReader:
    """Pulls whitespace-separated integers from a stream, one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._iter_tokens(stream)

    @staticmethod
    def _iter_tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next_int(self) -> int:
        """
        Read the next integer.

        Raises:
            MalformedInput: On end of input or a non-integer token.
        """
        token = next(self._tokens, None)
        if token is None:
            raise MalformedInput("Unexpected end of input")
        try:
            return int(token)
        except ValueError:
            raise MalformedInput(f"Expected an integer, got {token!r}") from None


# ============================================================================
# Session
# ============================================================================

class Session:
    """
    Blocking interactive driver for one game.

    Exit codes: 0 for a win, a loss or end of input; 1 if the board
    configuration is rejected.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        rng: Any = None,
    ) -> None:
        """
        Args:
            stdin: Operator input stream (default: sys.stdin).
            stdout: Operator output stream (default: sys.stdout).
            rng: Random source or seed handed to Board.
        """
        self._reader = TokenReader(sys.stdin if stdin is None else stdin)
        self._out = sys.stdout if stdout is None else stdout
        self._rng = rng
        self.state: Optional[RevealState] = None

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out, flush=True)

    def _prompt_int(self, prompt: str) -> int:
        self._print(prompt, end="")
        return self._reader.next_int()

    # ========================================================================
    # Phases
    # ========================================================================

    def greet(self) -> None:
        """Print the welcome text and suggested presets."""
        self._print("Hello! Welcome to Minesweeper!")
        self._print()
        self._print("Suggested levels of difficulty:")
        self._print()
        for name, preset in PRESETS.items():
            self._print(
                f"{name} ({preset.rows}x{preset.cols} grid, "
                f"{preset.num_mines} mines)"
            )
        self._print()
        self._print("Insert your preferences below:")
        self._print()

    def read_config(self) -> BoardConfig:
        """Prompt for rows, columns and mines; raises on bad values."""
        rows = self._prompt_int("Enter number of rows: ")
        cols = self._prompt_int("Enter number of columns: ")
        num_mines = self._prompt_int("Enter number of mines: ")
        return BoardConfig(rows, cols, num_mines)

    def play(self) -> None:
        """Reveal cells until the game ends."""
        state = self.state
        print_board(state, self._out)

        if state.is_game_won():
            self._print(WIN_MESSAGE)
            return

        while True:
            self._print("Enter row and column to reveal: ", end="")
            row = self._reader.next_int()
            col = self._reader.next_int()
            try:
                state.reveal(row, col)
            except InvalidCoordinate as exc:
                self._print(str(exc))
                continue
            print_board(state, self._out)

            if state.is_game_won():
                self._print(WIN_MESSAGE)
                return
            if state.is_game_over():
                self._print(LOSS_MESSAGE)
                return

    def run(self) -> int:
        """Run a full session and return the process exit code."""
        self.greet()
        try:
            config = self.read_config()
        except InvalidConfiguration as exc:
            self._print()
            self._print(f"Invalid configuration: {exc}")
            return 1
        except MalformedInput:
            self._print()
            return 0

        self.state = RevealState(Board(config, rng=self._rng))
        try:
            self.play()
        except MalformedInput:
            self._print()
        return 0
