"""
Core enums and constants for the Counter Air engine.

Board layout (slot indexes):
    0-1   Escort
    2-3   High Strike
    4-5   SEAD
    6-7   Low Strike
    8-9   Intercept
    10-11 Active SAM
    12-13 Passive SAM
    14-15 Airbase
    16-17 AAA

Each zone owns two consecutive slots: attacking first, evading second.
"""

from __future__ import annotations

from enum import Enum, IntEnum

NUM_PLAYERS = 2
NUM_ZONES = 9
NUM_SLOTS = NUM_ZONES * 2

# Returned by current_player() once the game is over.
TERMINAL_PLAYER_ID = -4

# Wire ids of the two meta-moves; phase-specific choices use 0..10.
PASS_TURN_ID = 11
ADVANCE_PHASE_ID = 12
NUM_DISTINCT_MOVES = 13


class Player(IntEnum):
    """The two sides. Blue always moves first."""

    BLUE = 0
    RED = 1

    @property
    def opponent(self) -> Player:
        return Player(1 - self.value)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Zone(IntEnum):
    """Board zones; each maps to an (attacking, evading) slot pair."""

    ESCORT = 0
    HIGH_STRIKE = 1
    SEAD = 2
    LOW_STRIKE = 3
    INTERCEPT = 4
    ACTIVE_SAM = 5
    PASSIVE_SAM = 6
    AIRBASE = 7
    AAA = 8

    @property
    def attacking(self) -> int:
        """Slot index of the attacking counter."""
        return self.value * 2

    @property
    def evading(self) -> int:
        """Slot index of the evading counter."""
        return self.value * 2 + 1

    @classmethod
    def of_slot(cls, slot: int) -> Zone:
        return cls(slot // 2)


class Phase(IntEnum):
    """The ten phases of a wave, in play order."""

    PLACE_ESCORT = 0
    PLACE_HIGH_STRIKE = 1
    PLACE_SEAD = 2
    PLACE_INTERCEPT = 3
    PLACE_SAMS = 4
    AIR_TO_AIR = 5
    GROUND_TO_AIR = 6
    HIGH_STRIKE_ATTACK = 7
    UAV = 8
    LOW_STRIKE_ATTACK = 9

    @property
    def is_placement(self) -> bool:
        return self.value <= Phase.PLACE_SAMS.value

    @property
    def is_two_ply(self) -> bool:
        """Phases resolved as declare/resolve exchanges."""
        return self in (Phase.AIR_TO_AIR, Phase.GROUND_TO_AIR)


class SubTurn(Enum):
    """Position inside a two-ply combat exchange."""

    DECLARE = "declare"
    RESOLVE = "resolve"


class GameResult(Enum):
    """Final game outcome."""

    BLUE_WINS = "blue_wins"
    DRAW = "draw"
    RED_WINS = "red_wins"

    @property
    def returns(self) -> tuple[float, float]:
        """(blue, red) terminal returns."""
        if self is GameResult.BLUE_WINS:
            return (1.0, -1.0)
        if self is GameResult.RED_WINS:
            return (-1.0, 1.0)
        return (0.0, 0.0)

    @property
    def winner(self) -> Player | None:
        if self is GameResult.BLUE_WINS:
            return Player.BLUE
        if self is GameResult.RED_WINS:
            return Player.RED
        return None
