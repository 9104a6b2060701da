"""
Autoplay runner for Minesweeper agents.

Plays complete games with an agent through the environment and
collects results.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..agents.base_agent import BaseAgent
from ..game.board import BoardConfig
from ..game.environment import MinesweeperEnv

logger = logging.getLogger(__name__)


# ============================================================================
# Autoplay Configuration
# ============================================================================

@dataclass
class AutoplayConfig:
    """Configuration for an autoplay session."""

    board: BoardConfig = field(default_factory=BoardConfig)
    num_games: int = 100
    # Reveals per game; a game needs at most one per safe cell
    max_steps: Optional[int] = None
    seed: Optional[int] = None
    log_frequency: int = 10

    @property
    def step_limit(self) -> int:
        if self.max_steps is not None:
            return self.max_steps
        return self.board.safe_cells + 1


# ============================================================================
# Statistics
# ============================================================================

@dataclass
class GameResult:
    """Outcome of a single game."""

    won: bool = False
    steps: int = 0
    revealed_cells: int = 0
    total_reward: float = 0.0
    game_state: str = "PLAYING"


@dataclass
class AutoplayStats:
    """Accumulated results over many games."""

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    total_steps: int = 0
    total_revealed: int = 0
    total_reward: float = 0.0
    results: List[GameResult] = field(default_factory=list, repr=False)

    def record(self, result: GameResult) -> None:
        self.games_played += 1
        self.total_steps += result.steps
        self.total_revealed += result.revealed_cells
        self.total_reward += result.total_reward
        if result.won:
            self.wins += 1
        elif result.game_state == "LOST":
            self.losses += 1
        self.results.append(result)

    @property
    def win_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.wins / self.games_played

    @property
    def avg_steps(self) -> float:
        if not self.games_played:
            return 0.0
        return self.total_steps / self.games_played

    @property
    def avg_revealed(self) -> float:
        if not self.games_played:
            return 0.0
        return self.total_revealed / self.games_played

    @property
    def avg_reward(self) -> float:
        if not self.games_played:
            return 0.0
        return self.total_reward / self.games_played

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "avg_steps": self.avg_steps,
            "avg_revealed": self.avg_revealed,
            "avg_reward": self.avg_reward,
        }


StepCallback = Callable[[MinesweeperEnv, int, float], None]


# ============================================================================
# Runner
# ============================================================================

class AutoplayRunner:
    """
    Play and score games with an agent.

    Each game uses a fresh layout; with a seed set, game i of a run is
    seeded with seed + i so two agents can be compared on the same
    boards.
    """

    def __init__(
        self,
        config: Optional[AutoplayConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        self.config = config or AutoplayConfig()
        self.env = MinesweeperEnv(self.config.board, render_mode=render_mode)

    def play_game(
        self,
        agent: BaseAgent,
        seed: Optional[int] = None,
        on_step: Optional[StepCallback] = None,
    ) -> GameResult:
        """
        Play one game to the end or until the step limit.

        Args:
            agent: Agent choosing the cells to reveal.
            seed: Seed for this game's mine layout.
            on_step: Called after each move with (env, action, reward).

        Returns:
            GameResult for the finished game.
        """
        observation, info = self.env.reset(seed=seed)
        agent.reset()
        result = GameResult(game_state=info["game_state"])

        for _ in range(self.config.step_limit):
            valid_actions = self.env.get_action_mask()
            if not np.any(valid_actions):
                break
            action = agent.select_action(observation, valid_actions)
            observation, reward, terminated, truncated, info = self.env.step(
                action
            )
            result.steps += 1
            result.total_reward += float(reward)
            if on_step is not None:
                on_step(self.env, action, float(reward))
            if terminated or truncated:
                break

        result.game_state = info["game_state"]
        result.won = result.game_state == "WON"
        result.revealed_cells = info["revealed"]
        return result

    def run(
        self,
        agent: BaseAgent,
        on_step: Optional[StepCallback] = None,
    ) -> AutoplayStats:
        """Play config.num_games games and aggregate the results."""
        stats = AutoplayStats()
        for game_index in range(self.config.num_games):
            seed = None
            if self.config.seed is not None:
                seed = self.config.seed + game_index
            stats.record(self.play_game(agent, seed=seed, on_step=on_step))

            if self._should_log(game_index + 1):
                logger.info(
                    "%s: %d/%d games, win rate %.1f%%",
                    agent.name,
                    stats.games_played,
                    self.config.num_games,
                    100 * stats.win_rate,
                )
        return stats

    def _should_log(self, games_played: int) -> bool:
        # log_frequency <= 0 turns progress logging off
        frequency = self.config.log_frequency
        return frequency > 0 and games_played % frequency == 0

    def compare(self, agents: Dict[str, BaseAgent]) -> Dict[str, AutoplayStats]:
        """Run every agent over the same configuration."""
        return {name: self.run(agent) for name, agent in agents.items()}
