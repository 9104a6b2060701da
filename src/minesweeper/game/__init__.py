"""
Minesweeper game module.

Provides core game logic: board generation, the game engine, and an
environment adapter for automated players.
"""
from .cell import Cell
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .errors import (
    MinesweeperError,
    InvalidConfigError,
    GenerationError,
    OutOfBoundsError,
    GameOverError,
)
from .generator import (
    generate_board,
    generate_from_config,
    build_board,
    place_mines,
    count_neighbor_mines,
)
from .engine import Game, GameState, check_win
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "MinesweeperError",
    "InvalidConfigError",
    "GenerationError",
    "OutOfBoundsError",
    "GameOverError",
    "generate_board",
    "generate_from_config",
    "build_board",
    "place_mines",
    "count_neighbor_mines",
    "Game",
    "GameState",
    "check_win",
    "MinesweeperEnv",
]
