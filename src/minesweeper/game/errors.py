"""
Exceptions raised by the Minesweeper game engine.

All engine errors derive from MinesweeperError so callers can handle
them at a single interaction boundary.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import GameState


class MinesweeperError(Exception):
    """Base class for all game engine errors."""


class InvalidConfigError(MinesweeperError, ValueError):
    """Board dimensions or mine count are not playable."""


class GenerationError(MinesweeperError):
    """A mine layout could not be produced or is inconsistent."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


class GameOverError(MinesweeperError):
    """A move was attempted after the game reached a terminal state."""

    def __init__(self, state: "GameState") -> None:
        super().__init__(f"Game is over ({state.name}); reset to play again")
        self.state = state
