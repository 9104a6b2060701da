"""
Board generator for Minesweeper.

Places mines uniformly at random and precomputes neighbor counts.
Randomness comes from an injected random.Random so a fixed seed
always yields the same layout.
"""
import logging
import random
from typing import Iterable, List, Optional

from .board import Board, BoardConfig, Position
from .errors import GenerationError

logger = logging.getLogger(__name__)


def place_mines(config: BoardConfig, rng: random.Random) -> List[Position]:
    """
    Choose distinct mine positions.

    Samples flat indices without replacement, so every layout is equally
    likely and a completely mined board terminates like any other.

    Args:
        config: Board configuration (already validated).
        rng: Entropy source.

    Returns:
        List of (row, col) mine positions.
    """
    indices = rng.sample(range(config.total_cells), config.mine_count)
    return [divmod(index, config.cols) for index in indices]


def count_neighbor_mines(board: Board) -> None:
    """Store the mine count of each cell's neighborhood on the cell."""
    for row, col, cell in board.cells():
        cell.neighbor_mines = sum(
            1
            for neighbor_row, neighbor_col in board.neighbors(row, col)
            if board.grid[neighbor_row][neighbor_col].is_mine
        )


def build_board(
    config: BoardConfig, mine_positions: Iterable[Position]
) -> Board:
    """
    Build a board from an explicit mine layout.

    Args:
        config: Board configuration.
        mine_positions: Exactly config.mine_count distinct positions.

    Returns:
        Board with mines placed and neighbor counts filled in.

    Raises:
        GenerationError: If positions repeat, fall outside the board,
            or do not match the configured mine count.
    """
    board = Board(config)
    placed = 0
    for row, col in mine_positions:
        if not board.is_valid_position(row, col):
            raise GenerationError(f"Mine position ({row}, {col}) is off the board")
        cell = board.grid[row][col]
        if cell.is_mine:
            raise GenerationError(f"Duplicate mine position ({row}, {col})")
        cell.is_mine = True
        placed += 1

    if placed != config.mine_count:
        raise GenerationError(
            f"Layout has {placed} mines, expected {config.mine_count}"
        )

    count_neighbor_mines(board)
    return board


def generate_from_config(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> Board:
    """Generate a random board for a validated configuration."""
    rng = rng or random.Random()
    board = build_board(config, place_mines(config, rng))
    logger.debug(
        "Generated %dx%d board with %d mines",
        config.rows, config.cols, config.mine_count,
    )
    return board


def generate_board(
    rows: int,
    cols: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a random board.

    Args:
        rows: Number of rows, positive.
        cols: Number of columns, positive.
        mine_count: Mines to place, 0 <= mine_count <= rows * cols.
        rng: Entropy source; a fresh random.Random if omitted.

    Raises:
        InvalidConfigError: If the parameters describe no playable board.
    """
    return generate_from_config(BoardConfig(rows, cols, mine_count), rng)
