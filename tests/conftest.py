"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Random Sources
# ============================================================================

class SequenceRandom:
    """Random source that replays a fixed list of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._index = 0
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value % stop


def mines_at(positions: Iterable[Tuple[int, int]]) -> SequenceRandom:
    """Random source that places mines at the given (row, col) cells."""
    values = []
    for row, col in positions:
        values.extend((row, col))
    return SequenceRandom(values)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for boards with mines at chosen positions."""

    def _make(
        positions: Iterable[Tuple[int, int]],
        rows: int = 9,
        columns: int = 9,
    ) -> Board:
        positions = list(positions)
        return Board.create(rows, columns, len(positions), rng=mines_at(positions))

    return _make


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 24 mines."""
    return Board()


@pytest.fixture
def corner_mine_board(make_board) -> Board:
    """9x9 board with a single mine at (0, 0)."""
    return make_board([(0, 0)])


@pytest.fixture
def scattered_board(make_board) -> Board:
    """9x9 board with mines spread over corners, edges and the middle."""
    return make_board([(0, 0), (0, 1), (4, 4), (8, 8), (3, 8), (8, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
