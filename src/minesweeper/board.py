"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging and game state management.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import (
    GameAlreadyEnded,
    InvalidCell,
    InvalidConfiguration,
    MinePlacementError,
)
from .rng import RandomSource, default_rng

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_DIMENSION = 9
MAX_MINE_DENSITY = 0.9
DEFAULT_MINE_DENSITY = 0.3

# Upper bound on random draws during placement, per cell on the board.
MAX_PLACEMENT_ATTEMPTS_PER_CELL = 1000


class GameState(Enum):
    """Possible states of the game."""

    ONGOING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = MIN_DIMENSION
    columns: int = MIN_DIMENSION
    num_mines: int = int(DEFAULT_MINE_DENSITY * MIN_DIMENSION * MIN_DIMENSION)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < MIN_DIMENSION or self.columns < MIN_DIMENSION:
            raise InvalidConfiguration(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {self.rows}x{self.columns}"
            )
        if self.num_mines < 1:
            raise InvalidConfiguration("Board needs at least one mine")
        if self.num_mines > self.max_mines:
            raise InvalidConfiguration(
                f"Too many mines (max {self.max_mines})"
            )

    @property
    def area(self) -> int:
        return self.rows * self.columns

    @property
    def max_mines(self) -> int:
        return int(self.area * MAX_MINE_DENSITY)

    @classmethod
    def with_default_mines(cls, rows: int, columns: int) -> "BoardConfig":
        """Build a config whose mine count is 30% of the board."""
        return cls(rows, columns, int(DEFAULT_MINE_DENSITY * rows * columns))


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Mines are laid out when the board is built and never move. Only cell
    visibility and the game state change afterwards. Every failing move
    raises before touching any state.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """
        Build a board and lay out its mines.

        Args:
            config: Board configuration (default: 9x9 with 24 mines).
            rng: Source of random coordinates. Defaults to the shared
                process-wide generator.
        """
        self.config = config or BoardConfig()
        self._rng = rng if rng is not None else default_rng()
        self._grid: List[List[Cell]] = []
        self._game_state = GameState.ONGOING
        self._hidden_cells = self.config.area
        self._safe_cells_revealed = 0

        self._init_grid()
        self._place_mines()
        self._calculate_adjacent_mines()
        logger.debug(
            "Created %dx%d board with %d mines",
            self.rows, self.columns, self.num_mines,
        )

    @classmethod
    def create(
        cls,
        rows: int,
        columns: int,
        mine_count: int,
        rng: Optional[RandomSource] = None,
    ) -> "Board":
        """
        Validate the parameters and build a ready-to-play board.

        Raises:
            InvalidConfiguration: If a dimension is below 9, or the mine
                count is below 1 or above 90% of the cells.
        """
        return cls(BoardConfig(rows, columns, mine_count), rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of hidden cells."""
        self._grid = [
            [Cell() for _ in range(self.columns)]
            for _ in range(self.rows)
        ]

    def _place_mines(self) -> None:
        """
        Mark random cells as mines until the configured count is reached.

        Coordinates are drawn independently and a draw that lands on an
        existing mine is discarded.
        """
        remaining = self.num_mines
        attempts_left = MAX_PLACEMENT_ATTEMPTS_PER_CELL * self.config.area
        while remaining > 0:
            if attempts_left == 0:
                raise MinePlacementError(
                    f"Placed {self.num_mines - remaining} of "
                    f"{self.num_mines} mines before giving up"
                )
            attempts_left -= 1
            row = self._rng.randrange(self.rows)
            col = self._rng.randrange(self.columns)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                remaining -= 1

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for row in range(self.rows):
            for col in range(self.columns):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> None:
        """
        Reveal the cell at the given position.

        Only the targeted cell is uncovered; empty neighbours are left
        hidden. Revealing a mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Raises:
            GameAlreadyEnded: If the game is won or lost.
            InvalidCell: If the position is off the board, or the cell is
                already revealed or flagged.
        """
        cell = self._check_interaction(row, col)
        if cell.is_flagged:
            raise InvalidCell(row, col, "is flagged; unflag it first")

        cell.reveal()
        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.info("Mine revealed at (%d, %d), game lost", row, col)
            return

        self._safe_cells_revealed += 1
        self._decrement_hidden_cells()

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Flag a hidden cell or remove the flag from a flagged one.

        Each successful toggle counts against the hidden-cell counter in
        either direction, so flag toggles alone can win the game.

        Raises:
            GameAlreadyEnded: If the game is won or lost.
            InvalidCell: If the position is off the board or the cell is
                already revealed.
        """
        cell = self._check_interaction(row, col)
        cell.toggle_flag()
        logger.debug(
            "Cell (%d, %d) is now %s", row, col, cell.state.name.lower()
        )
        self._decrement_hidden_cells()

    def _check_interaction(self, row: int, col: int) -> Cell:
        """Return the target cell if a move on it is allowed."""
        if self._game_state != GameState.ONGOING:
            raise GameAlreadyEnded(
                f"Game has already ended ({self._game_state.name.lower()})"
            )
        if not self._is_valid_position(row, col):
            raise InvalidCell(
                row, col,
                f"is outside the {self.rows}x{self.columns} board",
            )
        cell = self._grid[row][col]
        if cell.is_revealed:
            raise InvalidCell(row, col, "is already revealed")
        return cell

    def _decrement_hidden_cells(self) -> None:
        self._hidden_cells -= 1
        self._check_win_condition()

    def _check_win_condition(self) -> None:
        """Win once the counter runs out or every safe cell is open."""
        safe_cells = self.config.area - self.num_mines
        if (
            self._hidden_cells <= 0
            or self._safe_cells_revealed >= safe_cells
        ):
            self._game_state = GameState.WON
            logger.info("Game won")

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def has_ended(self) -> bool:
        """Check whether the game is won or lost."""
        return self._game_state != GameState.ONGOING

    def has_won(self) -> bool:
        """Check whether the game was won."""
        return self._game_state == GameState.WON

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def hidden_cells(self) -> int:
        """Current value of the hidden-cell counter."""
        return self._hidden_cells

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """List the (row, col) of every mine in row-major order."""
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.columns)
            if self._grid[row][col].is_mine
        ]

    def get_mine_mask(self) -> np.ndarray:
        """Boolean array marking mine positions."""
        mask = np.zeros((self.rows, self.columns), dtype=bool)
        for row, col in self.mine_positions():
            mask[row, col] = True
        return mask

    def get_observation(self) -> np.ndarray:
        """
        Get the player's view of the board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.columns), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.columns):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self) -> str:
        """
        Render the board as a text grid.

        The first line holds the column indices, each following line a
        row index and one character per cell. After a loss every cell
        shows its true content.
        """
        lines = ["  " + "".join(f"{col} " for col in range(self.columns))]
        show_all = self._game_state == GameState.LOST
        for row, cells in enumerate(self._grid):
            symbols = "".join(
                (cell.symbol if show_all else cell.display()) + " "
                for cell in cells
            )
            lines.append(f"{row} {symbols}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
