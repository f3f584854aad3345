"""
Exceptions raised by the Counter Air engine.

Nothing here is retryable. An InvariantViolation means the driver (or the
engine itself) is broken and the session should be abandoned; it is never a
game outcome.
"""

from __future__ import annotations


class CounterAirError(Exception):
    """Base class for all engine errors."""


class InvariantViolation(CounterAirError, RuntimeError):
    """The engine reached a state that legal play cannot produce."""


class IllegalMoveError(InvariantViolation):
    """A move id outside the current legal set was applied."""

    def __init__(self, move_id: int, player: int, phase: int, wave: int, legal: list[int]):
        self.move_id = move_id
        self.player = player
        self.phase = phase
        self.wave = wave
        self.legal = list(legal)
        super().__init__(
            f"Illegal move {move_id} for player {player} "
            f"(phase={phase}, wave={wave}, legal={self.legal})"
        )


class MoveLimitExceeded(InvariantViolation):
    """The move counter passed the configured ceiling (runaway phase logic)."""

    def __init__(self, num_moves: int, limit: int, player: int):
        self.num_moves = num_moves
        self.limit = limit
        self.player = player
        super().__init__(
            f"Move limit exceeded: {num_moves} > {limit} (current player {player})"
        )


class InvalidPlayerError(CounterAirError, ValueError):
    """A player id outside [0, num_players) was passed to a player query."""

    def __init__(self, player: int):
        self.player = player
        super().__init__(f"Invalid player id {player}")
