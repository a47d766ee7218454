"""
Draughts (checkers) implementation on an 8x8 board.

Board encoding (int8):
    0 = empty
    Positive = White (player 0): 1=Man, 2=King
    Negative = Black (player 1): -1=Man, -2=King

Sign gives the owner and magnitude gives the rank, so material is just
the sum of magnitudes per sign.

Turn structure is an explicit state machine (TurnMode):
    FreeChoice -> any owned piece may act; captures are mandatory
    ForcedContinuation(pos) -> only the piece at pos may act, and only by jumping
    Finished(winner) -> no actions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple, Union

import numpy as np

from rollout_games.errors import GameOverError, IllegalActionError, UnsupportedPlayerCountError
from rollout_games.games.board import EMPTY, Board, Pos
from rollout_games.games.game_base import GameBase
from rollout_games.games.game_rules import DIAGONALS


class Owner(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Owner":
        return Owner.BLACK if self is Owner.WHITE else Owner.WHITE


class Rank(IntEnum):
    MAN = 1
    KING = 2


class Piece(NamedTuple):
    """Decoded view of an occupied cell."""

    owner: Owner
    rank: Rank

    @property
    def code(self) -> int:
        return int(self.rank) if self.owner is Owner.WHITE else -int(self.rank)


WHITE_MAN = 1
WHITE_KING = 2
BLACK_MAN = -1
BLACK_KING = -2

CELL_STRINGS = {
    0: " ",
    WHITE_MAN: "w", WHITE_KING: "W",
    BLACK_MAN: "b", BLACK_KING: "B",
}

# Men move toward the opponent's back rank; kings use all four diagonals
MAN_DIRECTIONS = {
    Owner.WHITE: DIAGONALS[:2],
    Owner.BLACK: DIAGONALS[2:],
}
KING_DIRECTIONS = DIAGONALS


def cell_owner(cell: Optional[int]) -> Optional[Owner]:
    """Owner of a cell value; None for empty or off-board."""
    if not cell:
        return None
    return Owner.WHITE if cell > 0 else Owner.BLACK


def decode(cell: Optional[int]) -> Optional[Piece]:
    owner = cell_owner(cell)
    if owner is None:
        return None
    return Piece(owner, Rank(abs(cell)))


def directions_for(cell: int) -> Tuple[Pos, ...]:
    if cell in (WHITE_KING, BLACK_KING):
        return KING_DIRECTIONS
    if cell == WHITE_MAN:
        return MAN_DIRECTIONS[Owner.WHITE]
    if cell == BLACK_MAN:
        return MAN_DIRECTIONS[Owner.BLACK]
    return ()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Step:
    """Non-capturing diagonal slide."""
    origin: Pos
    dest: Pos

    def __str__(self) -> str:
        return f"{self.origin}->{self.dest}"


@dataclass(frozen=True)
class Jump:
    """Single hop over an opposing piece, removing it."""
    origin: Pos
    capture: Pos
    dest: Pos

    def __str__(self) -> str:
        return f"{self.origin}x{self.capture}->{self.dest}"


Action = Union[Step, Jump]


# ---------------------------------------------------------------------------
# Turn modes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FreeChoice:
    """The active player may move or capture with any piece."""


@dataclass(frozen=True)
class ForcedContinuation:
    """The piece at pos just captured and must keep capturing."""
    pos: Pos


@dataclass(frozen=True)
class Finished:
    """One side has no pieces left."""
    winner: Owner


TurnMode = Union[FreeChoice, ForcedContinuation, Finished]

FREE_CHOICE = FreeChoice()


class Draughts(GameBase):
    """Draughts with mandatory capture and forced chain continuation."""

    __slots__ = ('_board', 'active', 'mode')

    BOARD_SIZE = 8
    SETUP_ROWS = 3

    def __init__(self, size: int = BOARD_SIZE, setup_rows: int = SETUP_ROWS):
        if 2 * setup_rows >= size:
            raise ValueError(
                f"{setup_rows} setup rows per side do not fit on a {size}x{size} board"
            )
        self._board = self._initial_board(size, setup_rows)
        self.active = Owner.WHITE
        self.mode: TurnMode = FREE_CHOICE

    @staticmethod
    def _initial_board(size: int, setup_rows: int) -> Board:
        """Create starting position: pieces on squares where (x + y) is even."""
        board = Board(size)
        for y in range(setup_rows):
            for x in range(y % 2, size, 2):
                board.set((x, y), WHITE_MAN)
        for y in range(size - setup_rows, size):
            for x in range(y % 2, size, 2):
                board.set((x, y), BLACK_MAN)
        return board

    @classmethod
    def empty(cls, size: int = BOARD_SIZE, active: Owner = Owner.WHITE) -> "Draughts":
        """A board with no pieces, for composing positions with place()."""
        g = cls.__new__(cls)
        g._board = Board(size)
        g.active = Owner(active)
        g.mode = FREE_CHOICE
        return g

    def place(self, pos: Pos, piece: Optional[Piece]) -> None:
        """Put a piece on (or clear) a cell. Setup only, not a game move."""
        if not self._board.in_bounds(pos):
            raise ValueError(f"{pos} is off the {self._board.size}x{self._board.size} board")
        self._board.set(pos, EMPTY if piece is None else piece.code)

    # -- GameBase metadata -------------------------------------------------

    def game_id(self) -> str:
        return "draughts"

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    @property
    def board(self) -> Board:
        return self._board

    def deep_clone(self) -> "Draughts":
        g = Draughts.__new__(Draughts)
        g._board = self._board.copy()
        g.active = self.active
        g.mode = self.mode  # modes are frozen, safe to share
        return g

    def current_player(self) -> int:
        return int(self.active)

    def piece_at(self, pos: Pos) -> Optional[Piece]:
        """What occupies pos; None for an empty cell or an off-board pos."""
        return decode(self._board.try_get(pos))

    def owner_at(self, pos: Pos) -> Optional[int]:
        owner = cell_owner(self._board.try_get(pos))
        return None if owner is None else int(owner)

    # -- Move generation ---------------------------------------------------

    def _owned_positions(self, owner: Owner) -> List[Pos]:
        """Row-major positions of owner's pieces."""
        cells = self._board.cells
        mask = cells > 0 if owner is Owner.WHITE else cells < 0
        return [Pos(int(x), int(y)) for y, x in np.argwhere(mask)]

    def _jumps_from(self, start: Pos) -> List[Jump]:
        board = self._board
        cell = board.get(start)
        owner = cell_owner(cell)
        jumps = []
        for d in directions_for(cell):
            over = start + d
            victim = cell_owner(board.try_get(over))
            if victim is None or victim is owner:
                continue
            land = over + d
            if board.try_get(land) == EMPTY:
                jumps.append(Jump(start, over, land))
        return jumps

    def _steps_from(self, start: Pos) -> List[Step]:
        board = self._board
        return [
            Step(start, start + d)
            for d in directions_for(board.get(start))
            if board.try_get(start + d) == EMPTY
        ]

    def _can_jump(self, pos: Pos) -> bool:
        return len(self._jumps_from(pos)) > 0

    def valid_moves(self) -> List[Action]:
        """
        Legal actions in row-major piece order, then per-piece direction order.

        Captures are mandatory: if any owned piece can jump, steps are not offered.
        """
        mode = self.mode
        if isinstance(mode, Finished):
            return []
        if isinstance(mode, ForcedContinuation):
            return list(self._jumps_from(mode.pos))

        pieces = self._owned_positions(self.active)
        jumps: List[Action] = [j for p in pieces for j in self._jumps_from(p)]
        if jumps:
            return jumps
        return [s for p in pieces for s in self._steps_from(p)]

    # -- Move application --------------------------------------------------

    def apply_move(self, move: Action, *, validated: bool = False) -> None:
        """Apply a Step or Jump.

        Args:
            move: The action to apply.
            validated:  If True, skip validation (caller guarantees legality).
                        Use when move was already selected from valid_moves().

        Raises:
            GameOverError: if the game is already over.
            IllegalActionError: if move is not currently legal.
        """
        if isinstance(self.mode, Finished):
            raise GameOverError("Cannot apply move: the game is already over.")

        if not validated:
            legal = self.valid_moves()
            if move not in legal:
                raise IllegalActionError(move, int(self.active), f"mode is {self.mode}")
            # Equal actions may carry plain tuples; apply the enumerated one
            move = legal[legal.index(move)]

        board = self._board
        if isinstance(move, Step):
            piece = board.get(move.origin)
            board.set(move.origin, EMPTY)
            board.set(move.dest, piece)
            self._promote(move.dest)
            self.active = self.active.opponent
            self.mode = FREE_CHOICE

        elif isinstance(move, Jump):
            piece = board.get(move.origin)
            board.set(move.origin, EMPTY)
            board.set(move.capture, EMPTY)
            board.set(move.dest, piece)
            self._promote(move.dest)
            if self._can_jump(move.dest):
                self.mode = ForcedContinuation(move.dest)
            else:
                self.active = self.active.opponent
                self.mode = FREE_CHOICE
            if self._victory():
                self.mode = Finished(cell_owner(piece))

        else:
            raise IllegalActionError(move, int(self.active), "not a draughts action")

    def _promote(self, p: Pos) -> None:
        """Crown a man that has just reached the far rank."""
        cell = self._board.get(p)
        if cell == WHITE_MAN and p.y == self._board.size - 1:
            self._board.set(p, WHITE_KING)
        elif cell == BLACK_MAN and p.y == 0:
            self._board.set(p, BLACK_KING)

    def _victory(self) -> bool:
        white, black = self.piece_count()
        return white == 0 or black == 0

    # -- Evaluation --------------------------------------------------------

    def piece_count(self) -> Tuple[int, int]:
        """Material per side as (white, black); a king counts as two men."""
        cells = self._board.cells.astype(np.int16)
        white = int(cells[cells > 0].sum())
        black = int(-cells[cells < 0].sum())
        return white, black

    def score(self, player: int) -> float:
        white, black = self.piece_count()
        if player == 0:
            return float(white - black)
        if player == 1:
            return float(black - white)
        raise UnsupportedPlayerCountError(player)

    def winner(self) -> Optional[int]:
        if isinstance(self.mode, Finished):
            return int(self.mode.winner)
        return None

    def state_string(self) -> str:
        """Pretty-print the board, row 0 at the top."""
        size = self._board.size
        cells = self._board.cells
        lines = ["   " + "".join(f" {x}  " for x in range(size))]
        lines.append("  ╭" + "┬".join("───" for _ in range(size)) + "╮")
        for y in range(size):
            row = " │ ".join(CELL_STRINGS[int(cells[y, x])] for x in range(size))
            lines.append(f"{y} │ {row} │")
            if y < size - 1:
                lines.append("  ├" + "┼".join("───" for _ in range(size)) + "┤")
        lines.append("  ╰" + "┴".join("───" for _ in range(size)) + "╯")
        lines.append(f"\nPlayer: {self.active.name.title()}  Mode: {describe_mode(self.mode)}")
        return "\n".join(lines)


def describe_mode(mode: TurnMode) -> str:
    if isinstance(mode, ForcedContinuation):
        return f"must continue capturing from {mode.pos}"
    if isinstance(mode, Finished):
        return f"{mode.winner.name.title()} wins"
    return "free choice"
