"""
Unit tests for board generation.

Tests mine placement, neighbor counts and explicit layouts.
"""
import random

import pytest
from minesweeper.game import (
    Board,
    BoardConfig,
    GenerationError,
    InvalidConfigError,
    build_board,
    generate_board,
    place_mines,
)


def brute_force_count(board: Board, row: int, col: int) -> int:
    """Count mining neighbors without using Board.neighbors."""
    count = 0
    for r in range(row - 1, row + 2):
        for c in range(col - 1, col + 2):
            if (r, c) == (row, col):
                continue
            if 0 <= r < board.rows and 0 <= c < board.cols:
                count += board.grid[r][c].is_mine
    return count


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestMinePlacement:
    """Test that the right number of mines lands on distinct cells."""

    @pytest.mark.parametrize(
        "rows, cols, mines",
        [(9, 9, 10), (16, 30, 99), (1, 1, 0), (1, 1, 1), (3, 3, 9), (2, 7, 13)],
    )
    def test_mine_count_matches_config(
        self, rows: int, cols: int, mines: int
    ) -> None:
        """Generated board has exactly the requested mines."""
        board = generate_board(rows, cols, mines, random.Random(rows * cols))
        assert board.count_mines() == mines

    def test_positions_are_distinct(self, rng: random.Random) -> None:
        """No two mines share a cell."""
        positions = place_mines(BoardConfig(5, 5, 20), rng)
        assert len(set(positions)) == 20

    def test_fully_mined_board_terminates(self, rng: random.Random) -> None:
        """Dense layouts generate without retries."""
        board = generate_board(10, 10, 100, rng)
        assert all(cell.is_mine for _, _, cell in board.cells())

    def test_same_seed_same_layout(self) -> None:
        """Generation is deterministic for a fixed seed."""
        first = generate_board(9, 9, 10, random.Random(7))
        second = generate_board(9, 9, 10, random.Random(7))
        assert first == second

    def test_different_seeds_differ(self) -> None:
        """Different seeds give different layouts."""
        layouts = {
            tuple(map(tuple, generate_board(9, 9, 10, random.Random(s)).mine_mask()))
            for s in range(5)
        }
        assert len(layouts) > 1

    def test_every_cell_can_hold_a_mine(self) -> None:
        """Sampling reaches every position of the board."""
        rng = random.Random(0)
        seen = set()
        for _ in range(200):
            seen.update(place_mines(BoardConfig(3, 4, 2), rng))
        assert len(seen) == 12

    def test_too_many_mines_fails_fast(self, rng: random.Random) -> None:
        """Infeasible parameters raise instead of looping."""
        with pytest.raises(InvalidConfigError):
            generate_board(2, 2, 5, rng)

    def test_generated_cells_start_hidden(self, rng: random.Random) -> None:
        """Fresh boards have nothing revealed or flagged."""
        board = generate_board(6, 6, 8, rng)
        assert board.count_revealed() == 0
        assert board.count_flags() == 0


# ============================================================================
# Neighbor Count Tests
# ============================================================================

class TestNeighborCounts:
    """Test precomputed neighbor mine counts."""

    @pytest.mark.parametrize("seed", range(5))
    def test_counts_match_layout(self, seed: int) -> None:
        """Every cell's count equals its mining neighbors."""
        board = generate_board(8, 11, 25, random.Random(seed))
        for row, col, cell in board.cells():
            assert cell.neighbor_mines == brute_force_count(board, row, col)

    def test_mine_cells_are_counted_too(self) -> None:
        """Mines carry the count of neighboring mines as well."""
        board = build_board(BoardConfig(1, 3, 2), [(0, 0), (0, 1)])
        assert board.grid[0][0].neighbor_mines == 1
        assert board.grid[0][1].neighbor_mines == 1
        assert board.grid[0][2].neighbor_mines == 1

    def test_center_of_ring(self) -> None:
        """A cell surrounded by mines counts 8."""
        ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (1, 1)]
        board = build_board(BoardConfig(3, 3, 8), ring)
        assert board.grid[1][1].neighbor_mines == 8


# ============================================================================
# Explicit Layout Tests
# ============================================================================

class TestBuildBoard:
    """Test building boards from explicit mine positions."""

    def test_duplicate_position_raises(self) -> None:
        """Repeating a position is rejected."""
        with pytest.raises(GenerationError, match="Duplicate"):
            build_board(BoardConfig(3, 3, 2), [(0, 0), (0, 0)])

    def test_off_board_position_raises(self) -> None:
        """Positions must be on the board."""
        with pytest.raises(GenerationError, match="off the board"):
            build_board(BoardConfig(3, 3, 1), [(3, 0)])

    def test_wrong_count_raises(self) -> None:
        """Layout size must match the configured mine count."""
        with pytest.raises(GenerationError, match="expected 2"):
            build_board(BoardConfig(3, 3, 2), [(0, 0)])
