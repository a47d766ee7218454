"""
Rollout Games - flat Monte-Carlo rollout search over two-player board games.

Every ruleset implements one contract (GameBase); agents and drivers only
ever talk to that contract.

Quick Start:
    import numpy as np
    from rollout_games import Draughts, RolloutAgent, RandomAgent, take_turn

    game = Draughts()
    agents = (RolloutAgent(iterations=50, depth=10), RandomAgent())
    rng = np.random.default_rng(0)
    while take_turn(agents, game, rng):
        pass
    print(game.winner())

Modules:
    games      - GameBase contract, board primitives, draughts, tic-tac-toe
    agents     - random and rollout search agents
    simulation - turn driver and parallel tournament runner
    ui         - interactive session and terminal rendering
    utils      - game/agent registries and factories
"""

from rollout_games.agents import GameAgent, RandomAgent, RolloutAgent
from rollout_games.api import start_contest, start_interactive
from rollout_games.core import Tally
from rollout_games.errors import (
    GameError,
    ContractViolationError,
    IllegalActionError,
    GameOverError,
    UnsupportedPlayerCountError,
)
from rollout_games.games import Board, Draughts, GameBase, Pos, TicTacToe
from rollout_games.simulation import (
    TournamentRunner,
    TournamentResult,
    DEFAULT_WORKER_COUNT,
    run_contest,
    take_turn,
    play_out,
)
from rollout_games.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Main API
    "start_contest",
    "start_interactive",
    "Config",
    "TournamentRunner",
    "TournamentResult",
    "DEFAULT_WORKER_COUNT",
    "run_contest",
    "take_turn",
    "play_out",
    # Games
    "GameBase",
    "Board",
    "Pos",
    "Draughts",
    "TicTacToe",
    # Agents
    "GameAgent",
    "RandomAgent",
    "RolloutAgent",
    # Types
    "Tally",
    # Errors
    "GameError",
    "ContractViolationError",
    "IllegalActionError",
    "GameOverError",
    "UnsupportedPlayerCountError",
]
