"""
GameBase - abstract base class for all two-player board games.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from rollout_games.games.board import Board, Pos


class GameBase(ABC):
    """
    Abstract base class for all board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - A game object IS its state. apply_move() mutates it in place.
    - Search never shares a game between trials: it works on deep_clone()s,
      so deep_clone() must not share any mutable sub-object.
    - Agents and drivers only talk to this interface, never to a concrete
      ruleset, and only ever apply moves taken from valid_moves().
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'draughts')."""
        pass

    def num_players(self) -> int:
        """Return number of players in the game."""
        return 2

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used for every rollout trial and every tournament job.
        """
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return index (0 or 1) of the player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Any]:
        """
        Return all legal moves from the current state.

        Order is deterministic for a given state. Empty when the game is
        over or the player to act is stuck.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Any, *, validated: bool = False) -> None:
        """
        Apply a move to the game. Mutates internal state.

        Args:
            move: The move to apply.
            validated:  If True, skip validation (caller guarantees
                        the move came from valid_moves() on this state).

        Raises:
            GameOverError: if the game is already over.
            IllegalActionError: if move is not legal (validated=False only).
        """
        pass

    @abstractmethod
    def score(self, player: int) -> float:
        """
        Heuristic value of the position from player's perspective.
        Higher is better; unbounded; never used for legality.
        """
        pass

    @abstractmethod
    def winner(self) -> Optional[int]:
        """Return the winning player index, or None while undecided."""
        pass

    def is_over(self) -> bool:
        """Return True if the game has ended (won, drawn, or no legal moves)."""
        return self.winner() is not None or len(self.valid_moves()) == 0

    @property
    @abstractmethod
    def board(self) -> Board:
        """The grid backing this game (read-only use by renderers)."""
        pass

    def board_size(self) -> int:
        return self.board.size

    def cell_at(self, pos: Pos) -> Optional[int]:
        """Raw cell value at pos, or None off the board."""
        return self.board.try_get(pos)

    @abstractmethod
    def owner_at(self, pos: Pos) -> Optional[int]:
        """Index of the player occupying pos, or None for empty / off-board."""
        pass

    def moves_from(self, pos: Pos) -> List[Any]:
        """Legal moves whose origin is pos (used to highlight one piece's options)."""
        return [m for m in self.valid_moves() if move_origin(m) == pos]

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass


def move_origin(move: Any) -> Pos:
    """Cell a move starts from: its origin, or the placed cell for placements."""
    origin = getattr(move, "origin", None)
    return origin if origin is not None else move.pos


def move_dest(move: Any) -> Pos:
    """Cell a move ends on: its destination, or the placed cell for placements."""
    dest = getattr(move, "dest", None)
    return dest if dest is not None else move.pos
