"""Uniform-random agent: zero lookahead."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from rollout_games.agents.base import GameAgent

if TYPE_CHECKING:
    from rollout_games.games.game_base import GameBase


@dataclass(frozen=True)
class RandomAgent(GameAgent):
    """Picks uniformly among the legal moves."""

    name: str = "random"

    def choose_action(self, game: "GameBase", rng: np.random.Generator) -> Optional[Any]:
        moves = game.valid_moves()
        if not moves:
            return None
        return moves[int(rng.integers(len(moves)))]
