"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, Cell, Game, build_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded entropy source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def default_game(rng: random.Random) -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game(rng=rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return build_board(BoardConfig(5, 5, 0), [])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Numbers surround the mine; everything else is an open zero region.
    """
    return build_board(BoardConfig(5, 5, 1), [(4, 4)])


@pytest.fixture
def wall_board() -> Board:
    """
    4x5 board with a vertical wall of mines in column 2.

    Revealing the left side must not leak through the wall.
    """
    return build_board(
        BoardConfig(4, 5, 4), [(0, 2), (1, 2), (2, 2), (3, 2)]
    )


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


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
