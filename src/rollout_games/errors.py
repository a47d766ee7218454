"""Structured exceptions raised across the game contract."""

from __future__ import annotations

from typing import Any


class GameError(Exception):
    """Base class for rollout_games exceptions."""


class ContractViolationError(GameError):
    """A caller broke the game contract; the state must not be trusted further."""


class IllegalActionError(ContractViolationError, ValueError):
    """Raised when an action outside the current legal set is applied."""

    def __init__(self, action: Any, player: int, reason: str | None = None):
        self.action = action
        self.player = player
        self.reason = reason
        message = f"Illegal action {action!r} for player {player}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class GameOverError(ContractViolationError, RuntimeError):
    """Raised when an action is applied to a game that has already ended."""


class UnsupportedPlayerCountError(ContractViolationError):
    """Raised when a two-player component sees a player index other than 0 or 1."""

    def __init__(self, player: int):
        self.player = player
        super().__init__(f"Unsupported player index {player}: only two-player games are supported")
