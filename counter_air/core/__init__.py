"""Core types shared by every part of the engine."""

from .types import (
    ADVANCE_PHASE_ID,
    NUM_DISTINCT_MOVES,
    NUM_PLAYERS,
    NUM_SLOTS,
    NUM_ZONES,
    PASS_TURN_ID,
    TERMINAL_PLAYER_ID,
    GameResult,
    Phase,
    Player,
    SubTurn,
    Zone,
)
from .moves import Move, MoveType, move_to_string, player_to_string, validate_player

__all__ = [
    "ADVANCE_PHASE_ID",
    "NUM_DISTINCT_MOVES",
    "NUM_PLAYERS",
    "NUM_SLOTS",
    "NUM_ZONES",
    "PASS_TURN_ID",
    "TERMINAL_PLAYER_ID",
    "GameResult",
    "Phase",
    "Player",
    "SubTurn",
    "Zone",
    "Move",
    "MoveType",
    "move_to_string",
    "player_to_string",
    "validate_player",
]
