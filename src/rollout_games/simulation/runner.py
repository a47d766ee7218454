"""
Parallel tournament runner.

Plays many independent copies of a game on a process pool. Every job
carries its own game clone and its own spawned random stream; outcomes are
only counted once the whole batch has returned.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import signal
import sys
from multiprocessing.pool import Pool
from typing import List, Optional, Sequence, TYPE_CHECKING

import numpy as np

from rollout_games.simulation.jobs import GameJob, TournamentResult
from rollout_games.simulation.worker import run_game

if TYPE_CHECKING:
    from rollout_games.agents.base import GameAgent
    from rollout_games.games.game_base import GameBase

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["TournamentRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


def _worker_init():
    """Workers ignore SIGINT; only main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def _on_signal(signum, frame):
    _shutdown_all()
    if signum == signal.SIGINT:
        raise KeyboardInterrupt
    sys.exit(1)


if mp.current_process().name == 'MainProcess':
    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class TournamentRunner:
    """
    Manages a pool of worker processes that play independent games.

    Use as a context manager so the pool is always torn down.
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=_worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(
        self,
        game: "GameBase",
        agents: Sequence["GameAgent"],
        num_games: int,
        max_turns: int,
        seed: Optional[int] = None,
    ) -> TournamentResult:
        """
        Play num_games copies of game to completion (or max_turns plies).

        With a fixed seed the whole batch is reproducible: job i always
        gets the i-th spawned child stream.
        """
        if num_games <= 0:
            return TournamentResult.from_results([])

        pool = self._ensure_pool()
        jobs = self._make_jobs(game, agents, num_games, max_turns, seed)
        logger.info(
            "Running %d %s games on %d workers (%s vs %s)",
            num_games, game.game_id(), self.num_workers,
            agents[0].describe(), agents[1].describe(),
        )

        try:
            results = pool.map(run_game, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted, discarding unfinished batch")
            raise

        return TournamentResult.from_results(results)

    def _make_jobs(
        self,
        game: "GameBase",
        agents: Sequence["GameAgent"],
        count: int,
        max_turns: int,
        seed: Optional[int],
    ) -> List[GameJob]:
        if len(agents) != 2:
            raise ValueError(f"Expected exactly 2 agents, got {len(agents)}")

        streams = np.random.SeedSequence(seed).spawn(count)
        return [
            GameJob(
                game=game.deep_clone(),
                agents=(agents[0], agents[1]),
                max_turns=max_turns,
                seed=stream,
            )
            for stream in streams
        ]


def run_contest(
    game: "GameBase",
    agents: Sequence["GameAgent"],
    num_games: int,
    max_turns: int,
    num_workers: int = DEFAULT_WORKER_COUNT,
    seed: Optional[int] = None,
) -> TournamentResult:
    """One-shot batch: open a runner, play, shut it down."""
    with TournamentRunner(num_workers) as runner:
        return runner.run_batch(game, agents, num_games, max_turns, seed)
