"""
Rollout search agent - flat one-ply Monte-Carlo lookahead.

For every legal move, play `iterations` random continuations of at most
`depth` plies on private clones, and keep the move whose summed score
(from the mover's point of view) is highest.

Cost per decision is O(moves x iterations x depth) applications, which is
why games must clone cheaply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from rollout_games.agents.base import GameAgent

if TYPE_CHECKING:
    from rollout_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


def random_playout(game: "GameBase", rng: np.random.Generator, max_depth: int) -> int:
    """
    Play up to max_depth uniformly random plies on game, in place.

    Stops early when no moves remain. Returns the number of plies played.
    """
    for ply in range(max_depth):
        moves = game.valid_moves()
        if not moves:
            return ply
        game.apply_move(moves[int(rng.integers(len(moves)))], validated=True)
    return max_depth


@dataclass(frozen=True)
class RolloutAgent(GameAgent):
    """
    Args:
        iterations: random playouts per candidate move (>= 1)
        depth: maximum plies per playout after the candidate move (>= 0)
    """

    iterations: int = 100
    depth: int = 10
    name: str = "rollout"

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")

    def describe(self) -> str:
        return f"{self.name}(iterations={self.iterations}, depth={self.depth})"

    def evaluate(self, game: "GameBase", move: Any, rng: np.random.Generator) -> float:
        """Summed score of `iterations` playouts that start with move."""
        player = game.current_player()
        total = 0.0
        for _ in range(self.iterations):
            trial = game.deep_clone()
            trial.apply_move(move, validated=True)
            random_playout(trial, rng, self.depth)
            total += trial.score(player)
        return total

    def choose_action(self, game: "GameBase", rng: np.random.Generator) -> Optional[Any]:
        moves = game.valid_moves()
        if not moves:
            return None

        best_move = None
        best_score = float("-inf")
        for move in moves:
            score = self.evaluate(game, move, rng)
            # Strict comparison: the first enumerated move keeps ties
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "%s chose %s (total %.1f over %d moves)",
            self.describe(), best_move, best_score, len(moves),
        )
        return best_move
