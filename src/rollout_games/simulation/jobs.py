"""
Job data structures for parallel simulation.

Defines the input (GameJob) and output (JobResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from rollout_games.core.types import Tally

if TYPE_CHECKING:
    from rollout_games.agents.base import GameAgent
    from rollout_games.games.game_base import GameBase


@dataclass(frozen=True)
class GameJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to play one game without shared state:
    a private game copy, both agents, and a private random stream.
    """
    game: "GameBase"
    agents: Tuple["GameAgent", "GameAgent"]
    max_turns: int
    seed: np.random.SeedSequence


@dataclass(frozen=True)
class JobResult:
    """Outcome of one completed game."""
    winner: Optional[int]
    plies: int
    halted: bool  # True if play stopped because no move was produced


@dataclass(frozen=True)
class TournamentResult:
    """Aggregate of a finished batch; built only after every job returned."""
    results: List[JobResult]
    tally: Tally

    @classmethod
    def from_results(cls, results: List[JobResult]) -> "TournamentResult":
        return cls(results=list(results), tally=Tally.from_winners(r.winner for r in results))

    @property
    def mean_plies(self) -> float:
        if not self.results:
            return 0.0
        return sum(r.plies for r in self.results) / len(self.results)
