"""
Autoplay module for Minesweeper agents.

Runs agents through full games and aggregates their results.
"""
from .runner import (
    AutoplayConfig,
    GameResult,
    AutoplayStats,
    AutoplayRunner,
)

__all__ = [
    "AutoplayConfig",
    "GameResult",
    "AutoplayStats",
    "AutoplayRunner",
]
