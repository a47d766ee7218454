"""
Tests for rollout_games.cli
"""

from unittest.mock import patch

import pytest

from rollout_games.cli import build_config, main, parse_args, parse_human_players
from rollout_games.utils.config import DEFAULT_MAX_TURNS, DEFAULT_NUM_GAMES, Config


class TestParseArgs:

    def test_defaults(self):
        args = parse_args(["contest"])
        assert args.mode == "contest"
        assert args.game == "draughts"
        assert args.agents == ["rollout_quick", "random"]
        assert args.games == DEFAULT_NUM_GAMES
        assert args.max_turns == DEFAULT_MAX_TURNS
        assert args.workers is None
        assert args.seed is None
        assert args.players == "1"
        assert args.no_color is False

    def test_full_options(self):
        args = parse_args([
            "play", "-g", "tic_tac_toe", "-a", "random", "rollout:5:2",
            "-n", "10", "-t", "30", "-w", "2", "-s", "3", "-p", "1,2", "--no-color",
        ])
        assert args.mode == "play"
        assert args.game == "tic_tac_toe"
        assert args.agents == ["random", "rollout:5:2"]
        assert (args.games, args.max_turns, args.workers, args.seed) == (10, 30, 2, 3)
        assert args.players == "1,2"
        assert args.no_color is True

    @pytest.mark.parametrize("argv", [[], ["train"], ["contest", "-g", "chess"]])
    def test_rejected(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestParseHumanPlayers:

    @pytest.mark.parametrize("raw, expected", [
        ("1", [0]),
        ("2", [1]),
        ("2,1", [0, 1]),
        ("1, 1", [0]),
        ("", []),
        (None, []),
    ])
    def test_valid(self, raw, expected):
        assert parse_human_players(raw) == expected

    @pytest.mark.parametrize("raw", ["3", "0", "x", "1,two"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_human_players(raw)


class TestBuildConfig:

    def test_maps_arguments(self):
        config = build_config(parse_args(["contest", "-g", "tic_tac_toe", "-n", "4", "-w", "2", "-s", "8"]))
        assert config.game_name == "tic_tac_toe"
        assert config.num_games == 4
        assert config.num_workers == 2
        assert config.seed == 8

    def test_workers_default(self):
        config = build_config(parse_args(["contest", "-n", "1"]))
        assert config.num_workers == 1


class TestMain:

    def test_contest_dispatch(self):
        with patch("rollout_games.cli.start_contest") as start_contest:
            main(["contest", "-g", "tic_tac_toe", "-n", "3"])
        (config,), _ = start_contest.call_args
        assert isinstance(config, Config)
        assert config.num_games == 3

    def test_play_dispatch(self):
        with patch("rollout_games.cli.start_interactive") as start_interactive:
            main(["play", "-p", "2", "--no-color"])
        _, kwargs = start_interactive.call_args
        assert kwargs == {"human_players": [1], "color": False}
