"""
Board primitives - integer positions and a square int8 grid.

Optimized for fast copying: the whole grid is one contiguous int8 array.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional, Tuple

import numpy as np

# Cell value reserved for "nothing here" in every ruleset
EMPTY = 0


class Pos(NamedTuple):
    """An integer (x, y) coordinate, used both as a grid index and a move delta."""

    x: int
    y: int

    def __add__(self, other: "Pos") -> "Pos":  # type: ignore[override]
        return Pos(self.x + other[0], self.y + other[1])

    def __sub__(self, other: "Pos") -> "Pos":
        return Pos(self.x - other[0], self.y - other[1])

    def __neg__(self) -> "Pos":
        return Pos(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Board:
    """
    Fixed-size square grid of int8 cells addressed by Pos.

    Storage is row-major: cells[y, x]. Off-board lookups through try_get()
    return None, which is distinct from an EMPTY (0) cell.
    """
    __slots__ = ('size', 'cells')

    def __init__(self, size: int, fill: int = EMPTY, cells: Optional[np.ndarray] = None):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        if cells is None:
            cells = np.full((size, size), fill, dtype=np.int8)
        elif cells.shape != (size, size):
            raise ValueError(f"Expected a {size}x{size} grid, got shape {cells.shape}")
        self.cells = cells

    def copy(self) -> "Board":
        """Fast copy - cells.copy() is optimized for contiguous int arrays."""
        b = Board.__new__(Board)
        b.size = self.size
        b.cells = self.cells.copy()
        return b

    def in_bounds(self, p: Tuple[int, int]) -> bool:
        return 0 <= p[0] < self.size and 0 <= p[1] < self.size

    def get(self, p: Tuple[int, int]) -> int:
        """Unchecked read; negative coordinates would silently wrap, so stay in bounds."""
        return int(self.cells[p[1], p[0]])

    def try_get(self, p: Tuple[int, int]) -> Optional[int]:
        """Checked read: None when p is off the board."""
        if not self.in_bounds(p):
            return None
        return int(self.cells[p[1], p[0]])

    def set(self, p: Tuple[int, int], value: int) -> None:
        self.cells[p[1], p[0]] = value

    def positions(self) -> Iterator[Pos]:
        """Every position in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield Pos(x, y)

    def __iter__(self) -> Iterator[Tuple[Pos, int]]:
        for p in self.positions():
            yield p, int(self.cells[p.y, p.x])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Board(size={self.size})"
