"""
Core types for tallying finished games.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Tuple

# Player indices for two-player games
FIRST_PLAYER = 0
SECOND_PLAYER = 1
PLAYERS = (FIRST_PLAYER, SECOND_PLAYER)


class Tally(NamedTuple):
    """Outcome counts across a batch of games."""

    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0

    @classmethod
    def from_winners(cls, winners: Iterable[Optional[int]]) -> "Tally":
        """Count outcomes of a completed, read-only collection of winners."""
        winners = list(winners)
        return cls(
            first_wins=sum(1 for w in winners if w == FIRST_PLAYER),
            second_wins=sum(1 for w in winners if w == SECOND_PLAYER),
            draws=sum(1 for w in winners if w is None),
        )

    @property
    def total(self) -> int:
        return self.first_wins + self.second_wins + self.draws

    @property
    def distribution(self) -> Tuple[float, float, float]:
        t = self.total
        if t == 0:
            return (0.0, 0.0, 0.0)
        return (self.first_wins / t, self.second_wins / t, self.draws / t)

    def __str__(self) -> str:
        return f"P1 wins: {self.first_wins}, P2 wins: {self.second_wins}, draws: {self.draws}"
