"""
TicTacToe game implementation - any square size, any line length.

Uses int8 board:
    0 = empty
    1 = player 0 (X)
    2 = player 1 (O)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from rollout_games.core.types import PLAYERS
from rollout_games.errors import GameOverError, IllegalActionError, UnsupportedPlayerCountError
from rollout_games.games.board import EMPTY, Board, Pos
from rollout_games.games.game_base import GameBase
from rollout_games.games.game_rules import board_full, empty_cells, longest_line_through

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}


@dataclass(frozen=True)
class Place:
    """Put player's mark on pos."""
    pos: Pos
    player: int

    def __str__(self) -> str:
        return f"{CELL_STRINGS[self.player + 1]}@{self.pos}"


class TicTacToe(GameBase):
    """k-in-a-row on an N x N board (3-in-a-row on 3x3 by default)."""

    __slots__ = ('_board', 'active', 'length_to_win', 'victor')

    def __init__(self, size: int = 3, length_to_win: int = 3):
        if not 1 <= length_to_win <= size:
            raise ValueError(f"length_to_win must be in 1..{size}, got {length_to_win}")
        self._board = Board(size)
        self.active = 0
        self.length_to_win = length_to_win
        self.victor: Optional[int] = None

    @classmethod
    def from_board(cls, cells: np.ndarray, current_player: int, length_to_win: int = 3) -> "TicTacToe":
        """Build a game from a raw grid, recomputing the winner from it."""
        g = cls(cells.shape[0], length_to_win)
        g._board = Board(cells.shape[0], cells=np.asarray(cells, dtype=np.int8).copy())
        g.active = current_player
        g.victor = g._compute_winner()
        return g

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "tic_tac_toe"

    @property
    def board(self) -> Board:
        return self._board

    def deep_clone(self) -> "TicTacToe":
        g = TicTacToe.__new__(TicTacToe)
        g._board = self._board.copy()
        g.active = self.active
        g.length_to_win = self.length_to_win
        g.victor = self.victor
        return g

    def current_player(self) -> int:
        return self.active

    def owner_at(self, pos: Pos) -> Optional[int]:
        cell = self._board.try_get(pos)
        return cell - 1 if cell else None

    def valid_moves(self) -> List[Place]:
        """Every empty cell in row-major order, until someone has won."""
        if self.victor is not None:
            return []
        return [Place(p, self.active) for p in empty_cells(self._board)]

    def apply_move(self, move: Place, *, validated: bool = False) -> None:
        if self.victor is not None or board_full(self._board):
            raise GameOverError("Cannot apply move: the game is already over.")

        if not validated:
            if not isinstance(move, Place) or move.player != self.active:
                raise IllegalActionError(move, self.active, "not the active player's placement")
            legal = self.valid_moves()
            if move not in legal:
                raise IllegalActionError(move, self.active, f"cell {move.pos} is occupied or off the board")
            # Equal placements may carry plain tuples; apply the enumerated one
            move = legal[legal.index(move)]

        mark = move.player + 1
        self._board.set(move.pos, mark)

        if longest_line_through(self._board, move.pos) >= self.length_to_win:
            self.victor = move.player

        self.active = 1 - self.active

    def score(self, player: int) -> float:
        if player not in PLAYERS:
            raise UnsupportedPlayerCountError(player)
        if self.victor is None:
            return 0.0
        return 1.0 if self.victor == player else -1.0

    def winner(self) -> Optional[int]:
        return self.victor

    def _compute_winner(self) -> Optional[int]:
        """Recompute winner from current board state."""
        for p, cell in self._board:
            if cell != EMPTY and longest_line_through(self._board, p) >= self.length_to_win:
                return cell - 1
        return None

    def state_string(self) -> str:
        size = self._board.size
        cells = self._board.cells
        lines = ["╭" + "┬".join("───" for _ in range(size)) + "╮"]
        for y in range(size):
            row = "│ " + " │ ".join(CELL_STRINGS[int(cells[y, x])] for x in range(size)) + " │"
            lines.append(row)
            if y < size - 1:
                lines.append("├" + "┼".join("───" for _ in range(size)) + "┤")
        lines.append("╰" + "┴".join("───" for _ in range(size)) + "╯")
        return "\n".join(lines)
