"""
Tests for rollout_games.simulation.turns
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from rollout_games.errors import UnsupportedPlayerCountError
from rollout_games.games.board import Pos
from rollout_games.games.tic_tac_toe import Place, TicTacToe
from rollout_games.simulation.turns import play_out, take_turn


def scripted_agent(move):
    agent = MagicMock()
    agent.choose_action.return_value = move
    return agent


class TestTakeTurn:

    def test_applies_active_agents_move(self, tic_tac_toe, rng):
        move = Place(Pos(1, 1), 0)
        first, second = scripted_agent(move), scripted_agent(None)

        assert take_turn((first, second), tic_tac_toe, rng) is True
        assert tic_tac_toe.board.get(Pos(1, 1)) == 1
        assert tic_tac_toe.current_player() == 1
        first.choose_action.assert_called_once_with(tic_tac_toe, rng)
        second.choose_action.assert_not_called()

    def test_second_player_uses_second_agent(self, tic_tac_toe, rng):
        tic_tac_toe.apply_move(Place(Pos(0, 0), 0))
        first, second = scripted_agent(None), scripted_agent(Place(Pos(2, 2), 1))

        assert take_turn((first, second), tic_tac_toe, rng) is True
        assert tic_tac_toe.board.get(Pos(2, 2)) == 2
        first.choose_action.assert_not_called()

    def test_halts_without_move(self, tic_tac_toe, rng):
        agents = (scripted_agent(None), scripted_agent(None))
        assert take_turn(agents, tic_tac_toe, rng) is False
        assert tic_tac_toe.current_player() == 0

    def test_finished_game_halts(self, random_agents, rng):
        won = TicTacToe.from_board(np.array([[1, 1, 1], [2, 2, 0], [0, 0, 0]], dtype=np.int8), 1)
        assert take_turn(random_agents, won, rng) is False
        assert won.winner() == 0

    def test_unsupported_player_index(self, random_agents, rng):
        game = MagicMock()
        game.current_player.return_value = 2
        with pytest.raises(UnsupportedPlayerCountError):
            take_turn(random_agents, game, rng)
        game.apply_move.assert_not_called()

    def test_move_applied_as_validated(self, rng):
        game = MagicMock()
        game.current_player.return_value = 0
        move = object()
        take_turn((scripted_agent(move), scripted_agent(None)), game, rng)
        game.apply_move.assert_called_once_with(move, validated=True)


class TestPlayOut:

    def test_plays_until_no_moves(self, tic_tac_toe, random_agents, rng):
        plies = play_out(random_agents, tic_tac_toe, rng, max_turns=50)
        assert 5 <= plies <= 9
        assert tic_tac_toe.valid_moves() == []

    def test_respects_cap(self, draughts, random_agents, rng):
        assert play_out(random_agents, draughts, rng, max_turns=3) == 3

    def test_zero_cap(self, draughts, random_agents, rng):
        assert play_out(random_agents, draughts, rng, max_turns=0) == 0
        assert len(draughts.valid_moves()) == 7
