"""
Public API for contests and interactive play.

Usage:
    from rollout_games import Config, start_contest

    result = start_contest(Config(game_name="draughts", agents=("rollout:50:10", "random")))
    print(result.tally)
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from rollout_games.simulation import TournamentResult, run_contest
from rollout_games.ui import PlaySession, run_interactive
from rollout_games.utils.config import Config
from rollout_games.utils.factory import create_agents, create_game

logger = logging.getLogger(__name__)


def start_contest(config: Config) -> TournamentResult:
    """
    Play config.num_games independent games in parallel and tally them.

    Parameters
    ----------
    config : Config
        Game, agent specs, batch size, ply cap, workers and seed.
    """
    game = create_game(config.game_name)
    agents = create_agents(config.agents)

    print(
        f"Starting {game.game_id()} contest: {config.num_games} games, "
        f"{agents[0].describe()} vs {agents[1].describe()}, {config.num_workers} workers"
    )

    result = run_contest(
        game,
        agents,
        num_games=config.num_games,
        max_turns=config.max_turns,
        num_workers=config.num_workers,
        seed=config.seed,
    )

    print(result.tally)
    logger.info("Mean game length: %.1f plies", result.mean_plies)
    return result


def start_interactive(
    config: Config,
    human_players: Iterable[int] = (0,),
    color: bool = True,
) -> Optional[int]:
    """
    Play one game in the terminal. Returns the winner, if any.

    Seats listed in human_players are driven by typed coordinates; the
    others are played by the configured agents.
    """
    agents = create_agents(config.agents)
    session = PlaySession(
        lambda: create_game(config.game_name),
        agents,
        human_players=human_players,
        rng=np.random.default_rng(config.seed),
        max_responses=config.max_turns,
    )

    print(f"{session.game.game_id()}: type x,y to select, <enter> for an agent move, r to reset, q to quit")
    try:
        return run_interactive(session, color=color)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return session.game.winner()


__all__ = [
    "start_contest",
    "start_interactive",
]
