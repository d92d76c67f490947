"""
Minesweeper game module.

Provides the text Minesweeper board engine and its command-line driver.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState
from .errors import (
    GameAlreadyEnded,
    InvalidCell,
    InvalidConfiguration,
    MinePlacementError,
    MinesweeperError,
)
from .rng import RandomSource, default_rng, seeded_rng

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "GameAlreadyEnded",
    "InvalidCell",
    "InvalidConfiguration",
    "MinePlacementError",
    "MinesweeperError",
    "RandomSource",
    "default_rng",
    "seeded_rng",
]
