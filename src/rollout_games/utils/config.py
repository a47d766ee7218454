"""
Configuration and registries.
"""

from rollout_games.agents import RandomAgent, RolloutAgent
from rollout_games.games import Draughts, TicTacToe
from rollout_games.simulation import DEFAULT_WORKER_COUNT


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "draughts": Draughts,
    "tic_tac_toe": TicTacToe,
}


# ---------------------------------------------------------------------------
# Agent Presets
# ---------------------------------------------------------------------------

# Named agents accepted wherever an agent spec is expected
AGENT_PRESETS = {
    "random": RandomAgent(),
    "rollout_broad": RolloutAgent(iterations=600, depth=10),
    "rollout_deep": RolloutAgent(iterations=300, depth=20),
    "rollout_quick": RolloutAgent(iterations=20, depth=5),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_NUM_GAMES = 100
DEFAULT_MAX_TURNS = 400  # Ply cap per contest game; every game terminates


class Config:
    """Contest configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "draughts",
        agents: tuple = ("rollout_quick", "random"),
        num_games: int = DEFAULT_NUM_GAMES,
        max_turns: int = DEFAULT_MAX_TURNS,
        num_workers: int = DEFAULT_WORKER_COUNT,
        seed: int | None = None,
    ):
        if game_name not in GAMES:
            raise KeyError(f"Unknown game: {game_name}")
        if len(agents) != 2:
            raise ValueError(f"Exactly two agent specs are required, got {len(agents)}")
        if num_games < 0:
            raise ValueError(f"num_games must be >= 0, got {num_games}")
        if max_turns < 1:
            raise ValueError(f"max_turns must be >= 1, got {max_turns}")

        self.game_name = game_name
        self.agents = tuple(agents)
        self.num_games = num_games
        self.max_turns = max_turns
        self.seed = seed

        # Never start more workers than there are games to play
        self.num_workers = max(1, min(num_workers, num_games or 1))


# Default configuration
DEFAULT_CONFIG = Config()
