"""
Quantized damage model.

Counter Air replaces dice with a deterministic accumulator per defending
side. Every attack adds evade_damage (defender evades) or exposed_damage
(defender does nothing) to the defender's accumulator; once it reaches the
kill threshold it wraps, one unit in the targeted slot is destroyed and the
attacker scores a point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from ..core.types import Player

if TYPE_CHECKING:
    from ..state import GameState


@dataclass
class DamageResult:
    """
    Outcome of a single damage step.

    Attributes:
        defender: Side whose accumulator was advanced
        amount: Damage added
        target_slot: Slot that loses a unit on a kill
        hits_after: Defender accumulator after wrapping
        killed: Whether a unit was destroyed
    """

    defender: Player
    amount: int
    target_slot: int
    hits_after: int
    killed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defender": self.defender.name,
            "amount": self.amount,
            "target_slot": self.target_slot,
            "hits_after": self.hits_after,
            "killed": self.killed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DamageResult:
        return cls(
            defender=Player[data["defender"]],
            amount=data["amount"],
            target_slot=data["target_slot"],
            hits_after=data["hits_after"],
            killed=data["killed"],
        )


def inflict_damage(state: GameState, defender: Player, amount: int, target_slot: int) -> DamageResult:
    """
    Advance the defender's accumulator and apply a kill when it wraps.

    Args:
        state: Game state (modified in-place)
        defender: Side taking the damage
        amount: Damage to add (evade or exposed)
        target_slot: Slot index that loses a unit if the accumulator wraps

    Returns:
        DamageResult describing what happened
    """
    threshold = state.config.kill_threshold
    killed = False

    if defender is Player.BLUE:
        state.blue_hits += amount
        if state.blue_hits >= threshold:
            state.blue_hits -= threshold
            state.remove(target_slot)
            state.red_points += 1
            killed = True
        hits_after = state.blue_hits
    else:
        state.red_hits += amount
        if state.red_hits >= threshold:
            state.red_hits -= threshold
            state.remove(target_slot)
            state.blue_points += 1
            killed = True
        hits_after = state.red_hits

    return DamageResult(
        defender=defender,
        amount=amount,
        target_slot=target_slot,
        hits_after=hits_after,
        killed=killed,
    )


def evade(state: GameState, defender: Player, target_slot: int) -> DamageResult:
    """
    Evasive defence: take evade damage; a surviving target drops to evading.
    """
    result = inflict_damage(state, defender, state.config.evade_damage, target_slot)
    if not result.killed:
        state.flip_slot(target_slot)
    return result


def take_hit(state: GameState, defender: Player, target_slot: int) -> DamageResult:
    """No defence: take exposed damage against the target."""
    return inflict_damage(state, defender, state.config.exposed_damage, target_slot)
