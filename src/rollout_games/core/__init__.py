"""
Core module - fundamental types shared by the simulation layer.
"""

from rollout_games.core.types import Tally, FIRST_PLAYER, SECOND_PLAYER, PLAYERS

__all__ = [
    "Tally",
    "FIRST_PLAYER",
    "SECOND_PLAYER",
    "PLAYERS",
]
