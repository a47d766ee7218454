"""
UI module - interactive play on top of the core contract.
"""

from rollout_games.ui.session import PlaySession, pixel_to_pos, TILE_SIZE
from rollout_games.ui.terminal import render, parse_pos, run_interactive

__all__ = [
    "PlaySession",
    "pixel_to_pos",
    "TILE_SIZE",
    "render",
    "parse_pos",
    "run_interactive",
]
