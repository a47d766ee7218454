"""
Shared test fixtures for rollout_games tests.

Design principles:
- Game-agnostic fixtures where possible
- Explicit, seeded random streams
- Minimal, focused fixtures
"""

from typing import Callable, Dict, Tuple

import numpy as np
import pytest

from rollout_games.agents import RandomAgent, RolloutAgent
from rollout_games.games import Pos
from rollout_games.games.draughts import Draughts, Owner, Piece
from rollout_games.games.game_base import GameBase
from rollout_games.games.tic_tac_toe import TicTacToe


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so tests are reproducible."""
    return np.random.default_rng(1234)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def draughts() -> Draughts:
    """Fresh draughts game in the starting position."""
    return Draughts()


@pytest.fixture
def make_draughts() -> Callable[..., Draughts]:
    """Compose a draughts position from {(x, y): Piece} on an empty board."""
    def _make(pieces: Dict[Tuple[int, int], Piece], active: Owner = Owner.WHITE) -> Draughts:
        game = Draughts.empty(active=active)
        for (x, y), piece in pieces.items():
            game.place(Pos(x, y), piece)
        return game
    return _make


@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    """Fresh 3x3 tic-tac-toe."""
    return TicTacToe()


@pytest.fixture(params=["draughts", "tic_tac_toe"])
def any_game(request) -> GameBase:
    """Every registered game, in its starting position."""
    from rollout_games.utils.config import GAMES
    return GAMES[request.param]()


# =============================================================================
# Agent Fixtures
# =============================================================================

@pytest.fixture
def random_agents():
    return (RandomAgent(), RandomAgent())


@pytest.fixture
def small_rollout() -> RolloutAgent:
    """Rollout agent cheap enough for unit tests."""
    return RolloutAgent(iterations=4, depth=3)
