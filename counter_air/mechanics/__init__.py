"""Rules of the game: damage, legal moves, transitions and scoring."""

from .combat import DamageResult, evade, inflict_damage, take_hit
from .legal_moves import LegalMoveGenerator
from .outcome import OutcomeEvaluator
from .transitions import PhaseController, TransitionResult

__all__ = [
    "DamageResult",
    "evade",
    "inflict_damage",
    "take_hit",
    "LegalMoveGenerator",
    "OutcomeEvaluator",
    "PhaseController",
    "TransitionResult",
]
