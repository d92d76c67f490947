"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/flagged/revealed) and content (mine or adjacent mine count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE_SYMBOL = "*"
FLAG_SYMBOL = "F"
HIDDEN_SYMBOL = " "


class CellState(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Meaningless for mine cells.
        state: Current visibility state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it
            is already revealed or carries a flag.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flag a hidden cell or unflag a flagged one.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def symbol(self) -> str:
        """True content of the cell, regardless of visibility."""
        if self.is_mine:
            return MINE_SYMBOL
        return str(self.adjacent_mines)

    def display(self) -> str:
        """Character shown to the player while the game is running."""
        if self.state == CellState.FLAGGED:
            return FLAG_SYMBOL
        if self.state == CellState.REVEALED:
            return self.symbol
        return HIDDEN_SYMBOL

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
