"""
Turn driver - alternates two agents over one game.

Shared by interactive play (one call per input event) and by tournament
workers (called in a loop up to a ply cap).
"""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import numpy as np

from rollout_games.core.types import PLAYERS
from rollout_games.errors import UnsupportedPlayerCountError

if TYPE_CHECKING:
    from rollout_games.agents.base import GameAgent
    from rollout_games.games.game_base import GameBase


def take_turn(agents: Sequence["GameAgent"], game: "GameBase", rng: np.random.Generator) -> bool:
    """
    Let the agent owning the active player act once.

    Returns True if a move was applied ("progressed"), False if the agent
    produced none ("halted"). Callers tell a finished game from a stuck one
    by checking game.winner().
    """
    player = game.current_player()
    if player not in PLAYERS:
        raise UnsupportedPlayerCountError(player)

    move = agents[player].choose_action(game, rng)
    if move is None:
        return False
    game.apply_move(move, validated=True)
    return True


def play_out(
    agents: Sequence["GameAgent"],
    game: "GameBase",
    rng: np.random.Generator,
    max_turns: int,
) -> int:
    """Drive game until it halts or max_turns plies are played. Returns plies played."""
    for ply in range(max_turns):
        if not take_turn(agents, game, rng):
            return ply
    return max_turns
