"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior and display symbols.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, numbered_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_revealed is True


# ============================================================================
# Cell Display Tests
# ============================================================================

class TestCellDisplay:
    """Test the characters used to draw a cell."""

    def test_mine_symbol_is_star(self, mine_cell: Cell) -> None:
        assert mine_cell.symbol == "*"

    @pytest.mark.parametrize("count", range(0, 9))
    def test_safe_symbol_is_digit(self, count: int) -> None:
        """Safe cell content is its adjacent count as a digit."""
        assert Cell(adjacent_mines=count).symbol == str(count)

    def test_hidden_cell_displays_blank(self, mine_cell: Cell) -> None:
        """Hidden content is never shown, even for a mine."""
        assert mine_cell.display() == " "

    def test_flagged_cell_displays_f(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.display() == "F"

    def test_revealed_cell_displays_content(self, numbered_cell: Cell) -> None:
        assert numbered_cell.display() == "3"


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_revealed_cell_observation_is_count(
        self, numbered_cell: Cell
    ) -> None:
        assert numbered_cell.to_observation() == 3

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
