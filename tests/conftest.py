"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, RevealState


# ============================================================================
# Random Source Fixtures
# ============================================================================

class ScriptedRng:
    """
    Stand-in for numpy's Generator that returns a fixed sequence of draws.

    Board draws a row then a column for every placement attempt, so a
    script of positions maps one-to-one onto attempts, collisions included.
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        self._draws: List[int] = [v for position in positions for v in position]
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        value = self._draws.pop(0)
        assert low <= value < high, f"scripted draw {value} not in [{low}, {high})"
        self.calls += 1
        return value

    @property
    def exhausted(self) -> bool:
        return not self._draws


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRng]:
    """Factory for a random source that places mines at given positions."""
    return ScriptedRng


@pytest.fixture
def make_state() -> Callable[..., RevealState]:
    """Factory for a fresh game with mines at exact positions."""
    def _make(rows: int, cols: int, mines: List[Tuple[int, int]]) -> RevealState:
        board = Board(BoardConfig(rows, cols, len(mines)), rng=ScriptedRng(mines))
        return RevealState(board)
    return _make


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_state(make_state) -> RevealState:
    """3x3 game with no mines."""
    return make_state(3, 3, [])


@pytest.fixture
def corner_mine_state(make_state) -> RevealState:
    """3x3 game with a single mine at (0, 0)."""
    return make_state(3, 3, [(0, 0)])


@pytest.fixture
def diagonal_state(make_state) -> RevealState:
    """2x2 game with mines at (0, 0) and (1, 1)."""
    return make_state(2, 2, [(0, 0), (1, 1)])


@pytest.fixture
def center_mine_state(make_state) -> RevealState:
    """5x5 game with a single mine at (2, 2)."""
    return make_state(5, 5, [(2, 2)])


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def hard_config() -> BoardConfig:
    """Hard difficulty configuration."""
    return BoardConfig(16, 30, 99)
