"""
Interactive play session - the click model behind a board front-end.

The session never builds moves itself. A click either picks one of the
currently highlighted moves (by its destination) or highlights the legal
moves of the clicked piece. After a human move, agents answer until a
human is to act again.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Set, TYPE_CHECKING

import numpy as np

from rollout_games.games.board import Pos
from rollout_games.games.game_base import move_dest, move_origin
from rollout_games.simulation.turns import take_turn

if TYPE_CHECKING:
    from rollout_games.agents.base import GameAgent
    from rollout_games.games.game_base import GameBase

logger = logging.getLogger(__name__)

TILE_SIZE = 60


def pixel_to_pos(px: float, py: float, tile_size: int = TILE_SIZE) -> Pos:
    """Map pointer coordinates to the board cell under them."""
    return Pos(int(px // tile_size), int(py // tile_size))


class PlaySession:
    """
    One interactive game between humans and/or agents.

    Args:
        game_factory: builds a fresh game (used on reset)
        agents: (player 0, player 1) agents; also used for human seats on advance()
        human_players: player indices controlled by clicks
        rng: random stream for the agents
        max_responses: cap on consecutive agent plies after a human move
    """

    def __init__(
        self,
        game_factory: Callable[[], "GameBase"],
        agents: Sequence["GameAgent"],
        human_players: Iterable[int] = (0,),
        rng: Optional[np.random.Generator] = None,
        max_responses: int = 400,
    ):
        self._factory = game_factory
        self.game = game_factory()
        self.agents = tuple(agents)
        self.human_players: Set[int] = set(human_players)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_responses = max_responses
        self.highlighted: List[Any] = []
        self.halted = False

    def reset(self) -> None:
        self.game = self._factory()
        self.highlighted = []
        self.halted = False
        logger.info("Game reset")

    @property
    def human_to_act(self) -> bool:
        return self.game.current_player() in self.human_players

    def select(self, pos: Pos) -> Optional[Any]:
        """
        Handle a click on pos. Returns the move applied, if any.

        Placement games (whose moves start and end on the same cell) apply
        the placement straight away.
        """
        if not self.human_to_act:
            return None

        for move in self.highlighted:
            if move_dest(move) == pos:
                self._apply_human(move)
                return move

        options = self.game.moves_from(pos)
        for move in options:
            if move_dest(move) == pos:
                self._apply_human(move)
                return move

        if self.game.owner_at(pos) == self.game.current_player():
            self.highlighted = options
        return None

    def advance(self) -> bool:
        """Let the agent for the active seat play one ply."""
        self.highlighted = []
        progressed = take_turn(self.agents, self.game, self.rng)
        self.halted = not progressed
        return progressed

    def _apply_human(self, move: Any) -> None:
        player = self.game.current_player()
        self.game.apply_move(move)
        logger.info("Player %d played %s", player, move)
        self.highlighted = []

        if self.game.current_player() == player:
            # Forced continuation: show the follow-up captures straight away
            follow_up = self.game.moves_from(move_dest(move))
            if follow_up and all(move_origin(m) == move_dest(move) for m in self.game.valid_moves()):
                self.highlighted = follow_up
            return

        self.respond()

    def respond(self) -> int:
        """Let agents play until a human is to act or play halts. Returns plies played."""
        plies = 0
        while not self.human_to_act and plies < self.max_responses:
            if not take_turn(self.agents, self.game, self.rng):
                self.halted = True
                break
            plies += 1
        return plies

    def status(self) -> str:
        winner = self.game.winner()
        if winner is not None:
            return f"Player {winner + 1} wins"
        if self.halted or not self.game.valid_moves():
            return "Game halted: no moves available"
        seat = "you" if self.human_to_act else "agent"
        return f"Player {self.game.current_player() + 1} to move ({seat})"
