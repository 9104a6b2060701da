"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Expected win rate on beginner is low; useful as a floor when
    comparing agents.
    """

    name = "random"

    def __init__(
        self,
        board_rows: int = 9,
        board_cols: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_rows, board_cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Pick a random valid action (0 if none remain)."""
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        return int(self.rng.choice(valid_indices))
