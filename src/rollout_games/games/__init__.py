"""
Games module - board game implementations.
"""

from rollout_games.games.board import EMPTY, Board, Pos
from rollout_games.games.game_base import GameBase, move_dest, move_origin
from rollout_games.games.game_rules import board_full, empty_cells, longest_line_through
from rollout_games.games.draughts import Draughts
from rollout_games.games.tic_tac_toe import TicTacToe

__all__ = [
    "EMPTY",
    "Board",
    "Pos",
    "GameBase",
    "Draughts",
    "TicTacToe",
    "move_origin",
    "move_dest",
    "board_full",
    "empty_cells",
    "longest_line_through",
]
