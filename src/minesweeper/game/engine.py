"""
Game engine for Minesweeper.

Owns the board for one game and applies the rules: revealing with
flood fill, flagging, and deciding win or loss.
"""
import logging
import random
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, Position
from .errors import GameOverError
from .generator import generate_from_config

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


def check_win(board: Board) -> bool:
    """
    Check whether every safe cell is revealed and no mine is.

    Flags are ignored: a game is won without flagging anything, and a
    wrong flag does not block the win.
    """
    return all(
        cell.is_mine != cell.is_revealed for _, _, cell in board.cells()
    )


def _initial_state(board: Board) -> GameState:
    """State implied by a board handed to a new game."""
    if any(cell.is_mine and cell.is_revealed for _, _, cell in board.cells()):
        return GameState.LOST
    # An untouched board is never won, even when it has no safe cells
    if board.count_revealed() and check_win(board):
        return GameState.WON
    return GameState.PLAYING


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    The game holds one mutable board. Every operation hands back a
    snapshot, so callers can keep or compare boards freely without
    reaching into the live state.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
                Ignored when a board is given.
            rng: Entropy source for mine placement.
            board: Pre-built board to play on instead of a random one.
        """
        self._rng = rng or random.Random()
        if board is not None:
            self.config = board.config
            self._board = board.copy()
        else:
            self.config = config or BoardConfig()
            self._board = generate_from_config(self.config, self._rng)
        self._game_state = _initial_state(self._board)
        logger.info(
            "New game: %dx%d with %d mines",
            self.config.rows, self.config.cols, self.config.mine_count,
        )

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Tuple[Board, GameState]:
        """
        Reveal a cell at the given position.

        A mine ends the game and uncovers the whole board. A cell with no
        neighboring mines also reveals its neighbors, spreading through
        the connected empty region.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Tuple of (board snapshot, game state).

        Raises:
            OutOfBoundsError: If the position is off the board.
            GameOverError: If the game already ended.
        """
        self._require_playing(row, col)

        cell = self._board.grid[row][col]
        if cell.is_revealed or cell.is_flagged:
            return self.snapshot(), self._game_state

        if cell.is_mine:
            self._board.reveal_all()
            self._game_state = GameState.LOST
            logger.info("Mine hit at (%d, %d); game lost", row, col)
            return self.snapshot(), self._game_state

        revealed = self._flood_reveal(row, col)
        logger.debug("Revealed %d cells from (%d, %d)", revealed, row, col)

        if check_win(self._board):
            self._game_state = GameState.WON
            logger.info("All safe cells revealed; game won")

        return self.snapshot(), self._game_state

    def _flood_reveal(self, row: int, col: int) -> int:
        """Reveal from a safe cell outward through zero-count cells."""
        revealed = 0
        stack: List[Position] = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._board.grid[current_row][current_col]
            # is_revealed doubles as the visited marker
            if not cell.reveal():
                continue
            revealed += 1
            if cell.neighbor_mines == 0 and not cell.is_mine:
                for neighbor_row, neighbor_col in self._board.neighbors(
                    current_row, current_col
                ):
                    if self._board.grid[neighbor_row][neighbor_col].is_hidden:
                        stack.append((neighbor_row, neighbor_col))
        return revealed

    def toggle_flag(self, row: int, col: int) -> Board:
        """
        Toggle flag on a cell.

        Revealed cells are left alone. Flagging never reveals anything
        and never changes the game state.

        Raises:
            OutOfBoundsError: If the position is off the board.
            GameOverError: If the game already ended.
        """
        self._require_playing(row, col)
        if self._board.grid[row][col].toggle_flag():
            logger.debug("Flag toggled at (%d, %d)", row, col)
        return self.snapshot()

    def reset(self, config: Optional[BoardConfig] = None) -> Board:
        """
        Discard the current board and start a new game.

        Args:
            config: New configuration; keeps the current one if omitted.

        Returns:
            Snapshot of the fresh board.
        """
        if config is not None:
            self.config = config
        self._board = generate_from_config(self.config, self._rng)
        self._game_state = GameState.PLAYING
        logger.info(
            "New game: %dx%d with %d mines",
            self.config.rows, self.config.cols, self.config.mine_count,
        )
        return self.snapshot()

    def _require_playing(self, row: int, col: int) -> None:
        if self._game_state != GameState.PLAYING:
            raise GameOverError(self._game_state)
        self._board.check_position(row, col)

    # ========================================================================
    # State Accessors
    # ========================================================================

    def snapshot(self) -> Board:
        """Independent copy of the current board."""
        return self._board.copy()

    @property
    def board(self) -> Board:
        """Snapshot of the current board."""
        return self.snapshot()

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return self._board.count_flags()

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed, for display."""
        return self.config.mine_count - self.flag_count

    @property
    def safe_revealed(self) -> int:
        """Number of revealed cells that are not mines."""
        return self._board.count_safe_revealed()

    def is_hidden(self, row: int, col: int) -> bool:
        """Whether the cell is on the board, unrevealed and unflagged."""
        cell = self._board.get_cell(row, col)
        return cell is not None and cell.is_hidden

    def to_text(self) -> str:
        """ASCII rendering of the current board (see Board.to_text)."""
        return self._board.to_text()

    def get_observation(self) -> np.ndarray:
        """Board state as an int8 array (see Board.to_observation)."""
        return self._board.to_observation()

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        if not self.is_playing:
            return []
        return [
            (row, col)
            for row, col, cell in self._board.cells()
            if cell.is_hidden
        ]
