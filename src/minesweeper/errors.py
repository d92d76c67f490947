"""
Error types raised by the Minesweeper engine.

Every engine error derives from MinesweeperError, and additionally from
the builtin exception that best describes it so callers can catch either.
"""
from typing import Optional


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count are outside the allowed range."""


class InvalidCell(MinesweeperError, ValueError):
    """
    Targeted cell cannot take the requested action.

    Raised for out-of-bounds coordinates, cells that are already
    revealed, and flagged cells on reveal.
    """

    def __init__(self, row: int, col: int, reason: str) -> None:
        super().__init__(f"Cell ({row}, {col}) {reason}")
        self.row = row
        self.col = col
        self.reason = reason


class GameAlreadyEnded(MinesweeperError, RuntimeError):
    """A move was attempted after the game was won or lost."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "Game has already ended")


class MinePlacementError(MinesweeperError, RuntimeError):
    """Random source did not yield enough distinct cells for the mines."""
