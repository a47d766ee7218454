"""
GameAgent - the decision-making side of the game contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from rollout_games.games.game_base import GameBase


class GameAgent(ABC):
    """
    Chooses one action for whichever player is to act.

    Agents never mutate the game they are given, and draw all randomness
    from the generator passed in, so equal seeds give equal choices.
    """

    name: str = "agent"

    @abstractmethod
    def choose_action(self, game: "GameBase", rng: np.random.Generator) -> Optional[Any]:
        """Return a move from game.valid_moves(), or None when there is none."""
        pass

    def describe(self) -> str:
        return self.name
