"""
Logic-based agent for Minesweeper.

Deduces safe cells and mines from the revealed numbers, and only
guesses when no deduction is available.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import numpy as np

from ..game.cell import FLAGGED_VALUE, HIDDEN_VALUE
from .base_agent import BaseAgent


Position = Tuple[int, int]


@dataclass(frozen=True)
class Constraint:
    """
    Exactly `mines` of `cells` hold a mine.

    A revealed "2" with three hidden neighbors and no flags yields
    Constraint(cells={A, B, C}, mines=2).
    """

    cells: FrozenSet[Position]
    mines: int


# ============================================================================
# Logic Agent
# ============================================================================

class LogicAgent(BaseAgent):
    """
    Agent that plays by constraint deduction.

    Strategy:
        1. First move: a random corner (corners open up cascades often).
        2. Turn every revealed number into a constraint on its hidden
           neighbors, with flagged neighbors counted as mines.
        3. Propagate to a fixpoint: a constraint with no mines left marks
           its cells safe, one with as many mines as cells marks them all
           mines, and a constraint contained in another splits off the
           difference.
        4. Reveal a deduced safe cell, or else the hidden cell with the
           lowest estimated mine probability.
    """

    name = "logic"
    max_iterations = 100

    def __init__(
        self,
        board_rows: int = 9,
        board_cols: int = 9,
        mine_count: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the logic agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
            mine_count: Total mines, used to estimate the risk of cells
                no number touches. Defaults to an even-odds guess.
            seed: Random seed for the opening move.
        """
        super().__init__(board_rows, board_cols)
        self.mine_count = mine_count
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Reveal a provably safe cell, or the least risky one."""
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        if not np.any(observation >= 0):
            return self._select_opening(valid_indices)

        safe_cells, mine_cells = self.deduce(observation)
        for row, col in sorted(safe_cells):
            action = self.position_to_action(row, col)
            if valid_actions[action]:
                return action

        return self._select_least_risky(observation, valid_indices, mine_cells)

    def _select_opening(self, valid_indices: np.ndarray) -> int:
        corners = [
            self.position_to_action(0, 0),
            self.position_to_action(0, self.board_cols - 1),
            self.position_to_action(self.board_rows - 1, 0),
            self.position_to_action(self.board_rows - 1, self.board_cols - 1),
        ]
        candidates = [c for c in set(corners) if c in valid_indices]
        if not candidates:
            candidates = list(valid_indices)
        return int(self.rng.choice(candidates))

    # ========================================================================
    # Deduction
    # ========================================================================

    def _neighbors(self, row: int, col: int) -> List[Position]:
        return [
            (row + dr, col + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr or dc)
            and 0 <= row + dr < self.board_rows
            and 0 <= col + dc < self.board_cols
        ]

    def build_constraints(self, observation: np.ndarray) -> List[Constraint]:
        """One constraint per revealed number that still has hidden neighbors."""
        constraints = []
        for row in range(self.board_rows):
            for col in range(self.board_cols):
                value = int(observation[row, col])
                if not 1 <= value <= 8:
                    continue

                hidden = set()
                flagged = 0
                for nr, nc in self._neighbors(row, col):
                    if observation[nr, nc] == HIDDEN_VALUE:
                        hidden.add((nr, nc))
                    elif observation[nr, nc] == FLAGGED_VALUE:
                        flagged += 1

                remaining = value - flagged
                # Wrong flags can make a constraint unsatisfiable; skip it
                if hidden and 0 <= remaining <= len(hidden):
                    constraints.append(Constraint(frozenset(hidden), remaining))
        return constraints

    def deduce(
        self, observation: np.ndarray
    ) -> Tuple[Set[Position], Set[Position]]:
        """
        Propagate constraints until nothing new is learned.

        Returns:
            Tuple of (safe_cells, mine_cells).
        """
        safe: Set[Position] = set()
        mines: Set[Position] = set()
        constraints = set(self.build_constraints(observation))

        for _ in range(self.max_iterations):
            reduced: Set[Constraint] = set()
            progress = False

            for constraint in constraints:
                cells = constraint.cells - safe - mines
                count = constraint.mines - len(constraint.cells & mines)
                if not cells:
                    continue
                if count == 0:
                    safe |= cells
                    progress = True
                elif count == len(cells):
                    mines |= cells
                    progress = True
                else:
                    reduced.add(Constraint(frozenset(cells), count))

            for small in list(reduced):
                for large in list(reduced):
                    if not small.cells < large.cells:
                        continue
                    diff = Constraint(
                        large.cells - small.cells, large.mines - small.mines
                    )
                    if diff not in reduced:
                        reduced.add(diff)
                        progress = True

            constraints = reduced
            if not progress:
                break

        return safe, mines

    # ========================================================================
    # Guessing
    # ========================================================================

    def estimate_mine_probabilities(
        self, observation: np.ndarray, known_mines: Set[Position]
    ) -> Dict[Position, float]:
        """
        Rough mine probability for hidden cells touched by a number.

        Each constraint spreads its unresolved mines evenly over its
        unknown cells; a cell keeps the highest estimate it receives.
        """
        estimates: Dict[Position, float] = {}
        for constraint in self.build_constraints(observation):
            unknown = constraint.cells - known_mines
            remaining = constraint.mines - len(constraint.cells & known_mines)
            if not unknown or remaining < 0:
                continue
            probability = remaining / len(unknown)
            for cell in unknown:
                estimates[cell] = max(estimates.get(cell, 0.0), probability)
        return estimates

    def _default_risk(self, observation: np.ndarray) -> float:
        if self.mine_count is None:
            return 0.5
        hidden = int(np.count_nonzero(observation < 0))
        return self.mine_count / hidden if hidden else 1.0

    def _select_least_risky(
        self,
        observation: np.ndarray,
        valid_indices: np.ndarray,
        known_mines: Set[Position],
    ) -> int:
        estimates = self.estimate_mine_probabilities(observation, known_mines)
        default = self._default_risk(observation)

        best_action = int(valid_indices[0])
        best_risk = float("inf")
        for action in valid_indices:
            position = self.action_to_position(action)
            if position in known_mines:
                continue
            risk = estimates.get(position, default)
            if risk < best_risk:
                best_risk = risk
                best_action = int(action)
        return best_action
