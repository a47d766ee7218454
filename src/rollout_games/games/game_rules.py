"""
Shared board-scanning helpers for grid rulesets.

Direction tables and line scans work on Board/Pos so every ruleset treats
edges the same way: through checked lookups, never by wrapping.
"""

from __future__ import annotations

from typing import Iterable, List

from rollout_games.games.board import EMPTY, Board, Pos

# Diagonal deltas in enumeration order: forward pair (+y) first, then back pair
DIAGONALS = (Pos(-1, 1), Pos(1, 1), Pos(-1, -1), Pos(1, -1))

# One representative per line through a cell: horizontal, vertical, both diagonals
LINE_DIRECTIONS = (Pos(1, 0), Pos(0, 1), Pos(1, 1), Pos(1, -1))


def run_length(board: Board, start: Pos, delta: Pos, value: int) -> int:
    """Count consecutive cells equal to value, walking from start + delta."""
    count = 0
    p = Pos(*start) + delta
    while board.try_get(p) == value:
        count += 1
        p = p + delta
    return count


def longest_line_through(board: Board, start: Pos, directions: Iterable[Pos] = LINE_DIRECTIONS) -> int:
    """Length of the longest straight run of start's value passing through start."""
    value = board.get(start)
    if value == EMPTY:
        return 0
    best = 0
    for d in directions:
        best = max(best, 1 + run_length(board, start, d, value) + run_length(board, start, -d, value))
    return best


def empty_cells(board: Board) -> List[Pos]:
    """Empty positions in row-major order."""
    return [p for p, cell in board if cell == EMPTY]


def board_full(board: Board) -> bool:
    """Return True if the board has no EMPTY cells."""
    return not bool((board.cells == EMPTY).any())
