"""
Autoplay Minesweeper.

Board generation and game engine (minesweeper.game), automated players
(minesweeper.agents) and the runner that plays them (minesweeper.autoplay).
"""
__version__ = "0.1.0"
