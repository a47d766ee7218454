"""
Factory functions for creating games and agents from names.
"""

from typing import Tuple

from rollout_games.agents import GameAgent, RandomAgent, RolloutAgent
from rollout_games.games.game_base import GameBase
from rollout_games.utils.config import AGENT_PRESETS, GAMES


def create_game(game_name: str) -> GameBase:
    """
    Create a game instance in its starting position.

    Args:
        game_name: Key from GAMES registry (e.g., "draughts")

    Returns:
        Fresh game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name]()


def create_agent(spec: str) -> GameAgent:
    """
    Build an agent from a spec string.

    Accepted forms:
        "random"                  uniform-random agent
        "rollout:<iters>:<depth>" rollout agent, e.g. "rollout:600:10"
        any key of AGENT_PRESETS  e.g. "rollout_broad"
    """
    spec = spec.strip()
    if spec in AGENT_PRESETS:
        return AGENT_PRESETS[spec]

    kind, _, rest = spec.partition(":")
    if kind == "random" and not rest:
        return RandomAgent()

    if kind == "rollout":
        parts = rest.split(":")
        if len(parts) != 2:
            raise ValueError(
                f"Invalid agent spec '{spec}'. Expected 'rollout:<iterations>:<depth>'."
            )
        try:
            iterations, depth = int(parts[0]), int(parts[1])
        except ValueError as e:
            raise ValueError(
                f"Invalid agent spec '{spec}': iterations and depth must be integers."
            ) from e
        return RolloutAgent(iterations=iterations, depth=depth)

    available = ", ".join(["rollout:<iterations>:<depth>", *AGENT_PRESETS.keys()])
    raise ValueError(f"Unknown agent: {spec}. Available: {available}")


def create_agents(specs: Tuple[str, str]) -> Tuple[GameAgent, GameAgent]:
    """Build the (player 0, player 1) agent pair."""
    first, second = specs
    return create_agent(first), create_agent(second)
