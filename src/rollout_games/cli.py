"""
Command-line interface for contests and interactive play.
"""

import argparse
import logging

from rollout_games.api import start_contest, start_interactive
from rollout_games.utils.config import (
    AGENT_PRESETS,
    DEFAULT_MAX_TURNS,
    DEFAULT_NUM_GAMES,
    GAMES,
    Config,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player board games with rollout search agents"
    )
    parser.add_argument(
        "mode",
        choices=["play", "contest"],
        help="'play' for an interactive game, 'contest' for a batch of agent-vs-agent games",
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="draughts",
        help="Game to play (default: draughts)",
    )
    parser.add_argument(
        "--agents", "-a",
        nargs=2,
        metavar=("FIRST", "SECOND"),
        default=["rollout_quick", "random"],
        help=(
            "Agents for player 1 and player 2: 'random', 'rollout:<iterations>:<depth>', "
            f"or a preset ({', '.join(AGENT_PRESETS)}). Default: rollout_quick random"
        ),
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=DEFAULT_NUM_GAMES,
        help=f"Games per contest (default: {DEFAULT_NUM_GAMES})",
    )
    parser.add_argument(
        "--max-turns", "-t",
        type=int,
        default=DEFAULT_MAX_TURNS,
        help=f"Ply cap per game (default: {DEFAULT_MAX_TURNS})",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count - 1)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for reproducible runs (default: fresh entropy)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default="1",
        help="Comma-separated human player numbers for 'play' (e.g. '1,2'); empty for agents only.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Render the board without ANSI colours",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: str | None) -> list[int]:
    """Parse '1,2' style player numbers into 0-based player indices."""
    if not players_str:
        return []

    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    invalid = [p for p in human_players if p not in (1, 2)]
    if invalid:
        raise ValueError(f"Invalid player number(s): {invalid}. Only players 1-2 are supported.")

    return sorted({p - 1 for p in human_players})


def build_config(args: argparse.Namespace) -> Config:
    config_kwargs = {
        "game_name": args.game,
        "agents": tuple(args.agents),
        "num_games": args.games,
        "max_turns": args.max_turns,
        "seed": args.seed,
    }
    if args.workers:
        config_kwargs["num_workers"] = args.workers
    return Config(**config_kwargs)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_config(args)

    if args.mode == "contest":
        start_contest(config)
    else:
        start_interactive(
            config,
            human_players=parse_human_players(args.players),
            color=not args.no_color,
        )


if __name__ == "__main__":
    main()
