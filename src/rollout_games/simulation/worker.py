"""
Worker process logic for parallel simulation.

Workers receive GameJob objects and return JobResult objects. Each job
owns its game copy and random stream, so workers share nothing.
"""

from __future__ import annotations

import logging

import numpy as np

from rollout_games.simulation.jobs import GameJob, JobResult
from rollout_games.simulation.turns import play_out

logger = logging.getLogger(__name__)


def run_game(job: GameJob) -> JobResult:
    """Execute a single game up to job.max_turns plies."""
    rng = np.random.default_rng(job.seed)
    game = job.game

    plies = play_out(job.agents, game, rng, job.max_turns)
    # play_out only stops short of the cap when no move was produced
    halted = plies < job.max_turns

    winner = game.winner()
    logger.debug("%s finished after %d plies, winner=%s", game.game_id(), plies, winner)
    return JobResult(winner=winner, plies=plies, halted=halted)
