"""
Minesweeper autoplay agents module.

Provides agents that play Minesweeper from the observation array:
- RandomAgent: Baseline random selection
- LogicAgent: Constraint deduction with probability-based guessing
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .logic_agent import LogicAgent, Constraint

AGENTS = {
    RandomAgent.name: RandomAgent,
    LogicAgent.name: LogicAgent,
}

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "LogicAgent",
    "Constraint",
    "AGENTS",
]
