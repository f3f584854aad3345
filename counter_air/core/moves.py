"""
Move representation.

Internally a move is a tagged value: a phase-specific choice, a pass, or a
phase advance. At the boundary it is encoded into the integer ids used by
drivers and observers (0..10 for choices, 11 pass, 12 advance).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import InvalidPlayerError
from .types import ADVANCE_PHASE_ID, NUM_PLAYERS, PASS_TURN_ID, Player


class MoveType(Enum):
    PHASE = "phase"
    PASS_TURN = "pass_turn"
    ADVANCE_PHASE = "advance_phase"


@dataclass(frozen=True)
class Move:
    """
    A single move.

    Attributes:
        type: Which kind of move this is
        choice: Phase-specific option (only for MoveType.PHASE)
    """

    type: MoveType
    choice: Optional[int] = None

    def __post_init__(self):
        if self.type is MoveType.PHASE:
            if self.choice is None or not 0 <= self.choice < PASS_TURN_ID:
                raise ValueError(f"Phase move choice must be in [0, {PASS_TURN_ID}): {self.choice}")
        elif self.choice is not None:
            raise ValueError(f"{self.type.name} carries no choice")

    # Factories
    @classmethod
    def phase(cls, choice: int) -> Move:
        return cls(MoveType.PHASE, choice)

    @classmethod
    def pass_turn(cls) -> Move:
        return cls(MoveType.PASS_TURN)

    @classmethod
    def advance_phase(cls) -> Move:
        return cls(MoveType.ADVANCE_PHASE)

    # Wire encoding
    def to_id(self) -> int:
        if self.type is MoveType.PASS_TURN:
            return PASS_TURN_ID
        if self.type is MoveType.ADVANCE_PHASE:
            return ADVANCE_PHASE_ID
        return self.choice  # type: ignore[return-value]

    @classmethod
    def from_id(cls, move_id: int) -> Move:
        """Decode a wire id; raises ValueError outside [0, 12]."""
        if move_id == PASS_TURN_ID:
            return cls.pass_turn()
        if move_id == ADVANCE_PHASE_ID:
            return cls.advance_phase()
        return cls.phase(move_id)

    @property
    def is_meta(self) -> bool:
        return self.type is not MoveType.PHASE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "choice": self.choice, "id": self.to_id()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Move:
        return cls(MoveType(data["type"]), data.get("choice"))

    def __str__(self) -> str:
        if self.type is MoveType.PHASE:
            return f"Move({self.choice})"
        return self.type.name


def validate_player(player: int) -> Player:
    """Reject player ids outside [0, NUM_PLAYERS)."""
    if not isinstance(player, int) or not 0 <= player < NUM_PLAYERS:
        raise InvalidPlayerError(player)
    return Player(player)


def player_to_string(player: int) -> str:
    return validate_player(player).display_name


def move_to_string(player: int, move_id: int) -> str:
    """Human-readable label, e.g. ``Blue(5)``."""
    return f"{player_to_string(player)}({move_id})"
