"""
Simulation module - turn driving and parallel game execution.

Provides the turn driver shared by interactive and batch play, and the
infrastructure for running many independent games in parallel.
"""

from rollout_games.simulation.jobs import GameJob, JobResult, TournamentResult
from rollout_games.simulation.runner import TournamentRunner, DEFAULT_WORKER_COUNT, run_contest
from rollout_games.simulation.turns import take_turn, play_out
from rollout_games.simulation.worker import run_game

__all__ = [
    "GameJob",
    "JobResult",
    "TournamentResult",
    "TournamentRunner",
    "DEFAULT_WORKER_COUNT",
    "run_contest",
    "run_game",
    "take_turn",
    "play_out",
]
