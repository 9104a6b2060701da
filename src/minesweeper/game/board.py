"""
Board module for Minesweeper game.

Holds the board configuration and the rectangular grid of cells,
with neighbor geometry and read-only views for renderers.
"""
import copy
from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE
from .errors import InvalidConfigError, OutOfBoundsError


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "cols", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidConfigError(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfigError("Number of mines cannot be negative")
        if self.mine_count > self.total_cells:
            raise InvalidConfigError(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    A plain grid of cells. Mine placement lives in the generator and
    game rules live in the engine; the board only answers questions
    about its cells.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create an empty grid unless one was supplied."""
        if not self.grid:
            self.grid = [
                [Cell() for _ in range(self.config.cols)]
                for _ in range(self.config.rows)
            ]
        elif len(self.grid) != self.config.rows or any(
            len(row) != self.config.cols for row in self.grid
        ):
            raise InvalidConfigError(
                f"Grid shape does not match {self.rows}x{self.cols} config"
            )

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_position(self, row: int, col: int) -> None:
        """Raise OutOfBoundsError if position is outside the board."""
        if not self.is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the Moore neighborhood of a cell, clipped at the edges.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, cells in enumerate(self.grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def count_mines(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_mine)

    def count_flags(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_flagged)

    def count_revealed(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_revealed)

    def count_safe_revealed(self) -> int:
        """Revealed cells that are not mines; unaffected by loss disclosure."""
        return sum(
            1 for _, _, cell in self.cells()
            if cell.is_revealed and not cell.is_mine
        )

    def reveal_all(self) -> None:
        """Force every cell revealed for end-of-game display."""
        for _, _, cell in self.cells():
            cell.is_revealed = True

    def copy(self) -> "Board":
        """Return a deep, independent snapshot of this board."""
        return Board(self.config, copy.deepcopy(self.grid))

    # ========================================================================
    # Views (High-level)
    # ========================================================================

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array marking mine positions."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for row, col, cell in self.cells():
            mask[row, col] = cell.is_mine
        return mask

    def to_text(self) -> str:
        """Render board as ASCII text, one line per row."""
        symbols = {HIDDEN_VALUE: ".", FLAGGED_VALUE: "F", MINE_VALUE: "*", 0: " "}
        lines = []
        for values in self.to_observation():
            lines.append(
                " ".join(symbols.get(int(v), str(int(v))) for v in values)
            )
        return "\n".join(lines)
