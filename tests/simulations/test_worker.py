"""
Tests for rollout_games.simulation.worker
"""

from unittest.mock import patch

import numpy as np

from rollout_games.games.tic_tac_toe import TicTacToe
from rollout_games.simulation.jobs import GameJob
from rollout_games.simulation.worker import run_game


def make_job(game, agents, max_turns=100, seed=7):
    return GameJob(game=game, agents=agents, max_turns=max_turns, seed=np.random.SeedSequence(seed))


class TestRunGame:

    def test_plays_to_completion(self, tic_tac_toe, random_agents):
        result = run_game(make_job(tic_tac_toe, random_agents))
        assert result.halted is True
        assert 5 <= result.plies <= 9
        assert result.winner == tic_tac_toe.winner()

    def test_reproducible(self, random_agents):
        a = run_game(make_job(TicTacToe(), random_agents, seed=3))
        b = run_game(make_job(TicTacToe(), random_agents, seed=3))
        assert a == b

    def test_ply_cap(self, draughts, random_agents):
        result = run_game(make_job(draughts, random_agents, max_turns=4))
        assert result.plies == 4
        assert result.halted is False
        assert result.winner is None

    def test_finished_game(self, random_agents):
        won = TicTacToe.from_board(np.array([[1, 1, 1], [2, 2, 0], [0, 0, 0]], dtype=np.int8), 1)
        result = run_game(make_job(won, random_agents))
        assert result.plies == 0
        assert result.halted is True
        assert result.winner == 0

    def test_halted_follows_play_out(self, draughts, random_agents):
        """A game is halted exactly when play stops short of the ply cap."""
        with patch("rollout_games.simulation.worker.play_out", return_value=3) as play_out:
            result = run_game(make_job(draughts, random_agents, max_turns=10))
        assert play_out.call_args.args[3] == 10
        assert (result.plies, result.halted) == (3, True)

        with patch("rollout_games.simulation.worker.play_out", return_value=10):
            result = run_game(make_job(draughts, random_agents, max_turns=10))
        assert (result.plies, result.halted) == (10, False)
