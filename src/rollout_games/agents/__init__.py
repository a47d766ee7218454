"""
Agents module - move choosers that work against the GameBase contract.
"""

from rollout_games.agents.base import GameAgent
from rollout_games.agents.random_agent import RandomAgent
from rollout_games.agents.rollout_agent import RolloutAgent, random_playout

__all__ = [
    "GameAgent",
    "RandomAgent",
    "RolloutAgent",
    "random_playout",
]
