"""
Tests for rollout_games.simulation.runner
"""

import numpy as np
import pytest

from rollout_games.agents import RandomAgent, RolloutAgent
from rollout_games.games.tic_tac_toe import TicTacToe
from rollout_games.simulation import runner as runner_module
from rollout_games.simulation.runner import TournamentRunner, run_contest


class TestRunnerLifecycle:

    def test_registers_and_unregisters(self):
        runner = TournamentRunner(num_workers=1)
        assert runner in runner_module._active_runners
        runner.shutdown()
        assert runner not in runner_module._active_runners

    def test_shutdown_idempotent(self):
        runner = TournamentRunner(num_workers=1)
        runner.shutdown()
        runner.shutdown(force=True)
        assert runner._pool is None

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            TournamentRunner(num_workers=0)


class TestMakeJobs:

    def test_one_job_per_game(self, tic_tac_toe, random_agents):
        runner = TournamentRunner(num_workers=1)
        try:
            jobs = runner._make_jobs(tic_tac_toe, random_agents, 5, 50, seed=1)
        finally:
            runner.shutdown()

        assert len(jobs) == 5
        assert all(job.max_turns == 50 for job in jobs)
        assert len({id(job.game) for job in jobs}) == 5
        assert all(job.game is not tic_tac_toe for job in jobs)

    def test_streams_are_distinct_and_seeded(self, tic_tac_toe, random_agents):
        runner = TournamentRunner(num_workers=1)
        try:
            first = runner._make_jobs(tic_tac_toe, random_agents, 3, 50, seed=11)
            again = runner._make_jobs(tic_tac_toe, random_agents, 3, 50, seed=11)
        finally:
            runner.shutdown()

        draws = [np.random.default_rng(j.seed).integers(1 << 30) for j in first]
        assert len(set(draws)) == 3
        assert draws == [np.random.default_rng(j.seed).integers(1 << 30) for j in again]

    def test_requires_two_agents(self, tic_tac_toe):
        runner = TournamentRunner(num_workers=1)
        try:
            with pytest.raises(ValueError):
                runner._make_jobs(tic_tac_toe, (RandomAgent(),), 2, 50, seed=None)
        finally:
            runner.shutdown()


class TestRunBatch:

    def test_zero_games_skips_pool(self, tic_tac_toe, random_agents):
        runner = TournamentRunner(num_workers=2)
        result = runner.run_batch(tic_tac_toe, random_agents, 0, 50)
        assert result.tally.total == 0
        assert runner._pool is None
        runner.shutdown()

    @pytest.mark.slow
    def test_batch_tallies_every_game(self, random_agents):
        result = run_contest(TicTacToe(), random_agents, num_games=12, max_turns=20, num_workers=2, seed=5)
        assert result.tally.total == 12
        assert len(result.results) == 12

    @pytest.mark.slow
    def test_batch_reproducible_with_seed(self):
        agents = (RolloutAgent(iterations=2, depth=2), RandomAgent())
        a = run_contest(TicTacToe(), agents, num_games=6, max_turns=20, num_workers=2, seed=42)
        b = run_contest(TicTacToe(), agents, num_games=6, max_turns=20, num_workers=3, seed=42)
        assert a.results == b.results

    @pytest.mark.slow
    def test_original_game_untouched(self, tic_tac_toe, random_agents):
        run_contest(tic_tac_toe, random_agents, num_games=4, max_turns=20, num_workers=2, seed=0)
        assert len(tic_tac_toe.valid_moves()) == 9
