"""
PhaseController - applies moves to a GameState.

This module owns every state transition of the game:
- The two meta-moves (pass turn, advance phase) and the bookkeeping done
  when a phase or wave ends
- Force placement (phases 0-4)
- Two-ply combat exchanges (phases 5-6)
- Single-ply strikes (phases 7-9)

Phase moves are dispatched on (phase, player, sub_turn). A key with no
handler cannot be reached by legal play and is reported as an
InvariantViolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from infra.logger import get_logger

from ..core.moves import Move, MoveType
from ..core.types import GameResult, Phase, Player, SubTurn, Zone
from ..errors import InvariantViolation, MoveLimitExceeded
from ..state import GameState
from .combat import DamageResult, evade, inflict_damage, take_hit
from .outcome import OutcomeEvaluator

logger = get_logger(__name__)

Handler = Callable[[GameState, int], Optional[DamageResult]]

# Phase 5 choices
ESCORT_ENGAGE = 1
RED_TARGETS = {0: Zone.ESCORT, 1: Zone.HIGH_STRIKE, 2: Zone.LOW_STRIKE}
BLUE_AIR_NO_DEFENCE, BLUE_AIR_ESCORT_EVADES = 0, 1
RED_AIR_NO_DEFENCE, RED_AIR_EVADE = 0, 1

# Phase 6 choices
SEAD_TARGETS = {0: Zone.ACTIVE_SAM, 1: Zone.AAA}
RED_SAM_FIRE, RED_AAA_FIRE = 0, 1
BLUE_GROUND_NO_DEFENCE, BLUE_GROUND_EVADE, BLUE_GROUND_SEAD_SUPPRESS, BLUE_GROUND_LOW_STRIKE = 0, 1, 2, 3

# Phases 7-9 choices
HIGH_STRIKE_TARGETS = {0: Zone.AIRBASE, 1: Zone.ACTIVE_SAM, 2: Zone.PASSIVE_SAM}
UAV_TARGETS = {0: Zone.ACTIVE_SAM, 1: Zone.PASSIVE_SAM}
LOW_STRIKE_SUPPRESS_AIRBASE = 0
LOW_STRIKE_TARGETS = {1: Zone.ACTIVE_SAM, 2: Zone.PASSIVE_SAM}
LOW_STRIKE_GROUND_INTERCEPTOR = 3


@dataclass
class TransitionResult:
    """
    Record of one applied move.

    Attributes:
        move_id: Wire id of the move
        player: Side that made the move
        phase: Phase the move was made in
        wave: Wave the move was made in
        sub_turn: Sub-turn the move was made in
        damage: Damage step triggered by the move, if any
        phase_advanced: Whether the phase changed
        wave_advanced: Whether a new wave started
        result: Final outcome if this move ended the game
        log: Human-readable summary
    """

    move_id: int
    player: Player
    phase: Phase
    wave: int
    sub_turn: SubTurn
    damage: Optional[DamageResult]
    phase_advanced: bool
    wave_advanced: bool
    result: Optional[GameResult]
    log: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "move_id": self.move_id,
            "player": self.player.name,
            "phase": int(self.phase),
            "wave": self.wave,
            "sub_turn": self.sub_turn.value,
            "damage": self.damage.to_dict() if self.damage else None,
            "phase_advanced": self.phase_advanced,
            "wave_advanced": self.wave_advanced,
            "result": self.result.value if self.result else None,
            "log": self.log,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TransitionResult:
        damage = data.get("damage")
        result = data.get("result")
        return cls(
            move_id=data["move_id"],
            player=Player[data["player"]],
            phase=Phase(data["phase"]),
            wave=data["wave"],
            sub_turn=SubTurn(data["sub_turn"]),
            damage=DamageResult.from_dict(damage) if damage else None,
            phase_advanced=data.get("phase_advanced", False),
            wave_advanced=data.get("wave_advanced", False),
            result=GameResult(result) if result else None,
            log=data.get("log", ""),
        )


class PhaseController:
    """
    Stateless transition function for Counter Air.

    apply() trusts its caller to pass a legal move; game.apply() checks
    legality against the LegalMoveGenerator first.
    """

    def __init__(self, outcome: OutcomeEvaluator | None = None):
        self._outcome = outcome or OutcomeEvaluator()

        blue, red = Player.BLUE, Player.RED
        declare, resolve = SubTurn.DECLARE, SubTurn.RESOLVE
        self._handlers: Dict[Tuple[Phase, Player, SubTurn], Handler] = {
            (Phase.PLACE_ESCORT, blue, declare): self._place_escort,
            (Phase.PLACE_HIGH_STRIKE, blue, declare): self._place_high_strike,
            (Phase.PLACE_SEAD, blue, declare): self._place_sead,
            (Phase.PLACE_INTERCEPT, red, declare): self._place_intercept,
            (Phase.PLACE_SAMS, red, declare): self._place_sams,
            (Phase.AIR_TO_AIR, blue, declare): self._blue_air_declare,
            (Phase.AIR_TO_AIR, red, resolve): self._red_air_resolve,
            (Phase.AIR_TO_AIR, red, declare): self._red_air_declare,
            (Phase.AIR_TO_AIR, blue, resolve): self._blue_air_resolve,
            (Phase.GROUND_TO_AIR, blue, declare): self._blue_ground_declare,
            (Phase.GROUND_TO_AIR, red, resolve): self._red_ground_resolve,
            (Phase.GROUND_TO_AIR, red, declare): self._red_ground_declare,
            (Phase.GROUND_TO_AIR, blue, resolve): self._blue_ground_resolve,
            (Phase.HIGH_STRIKE_ATTACK, blue, declare): self._high_strike_attack,
            (Phase.UAV, blue, declare): self._uav_strike,
            (Phase.LOW_STRIKE_ATTACK, blue, declare): self._low_strike_attack,
        }

    def handler_for(self, phase: Phase, player: Player, sub_turn: SubTurn) -> Optional[Handler]:
        """Transition registered for a dispatch key (None if unreachable)."""
        return self._handlers.get((phase, player, sub_turn))

    def apply(self, state: GameState, move_id: int) -> TransitionResult:
        """
        Apply a move to the state in-place.

        Args:
            state: Game state (modified in-place)
            move_id: Wire id of the move

        Returns:
            TransitionResult describing the move

        Raises:
            MoveLimitExceeded: If a pass pushes the move counter past the ceiling
            InvariantViolation: If no transition exists for the current key
        """
        move = Move.from_id(move_id)
        player, phase, wave, sub_turn = (
            state.current_player,
            state.current_phase,
            state.current_wave,
            state.sub_turn,
        )
        result_before = state.result
        damage: Optional[DamageResult] = None

        if move.type is MoveType.PASS_TURN:
            self._pass_turn(state)
        elif move.type is MoveType.ADVANCE_PHASE:
            self._advance_phase(state)
        else:
            handler = self.handler_for(phase, player, sub_turn)
            if handler is None:
                raise InvariantViolation(
                    f"No transition for phase={phase.name}, player={player.name}, "
                    f"sub_turn={sub_turn.name}"
                )
            damage = handler(state, move.choice)  # type: ignore[arg-type]
            if phase.is_two_ply:
                state.num_moves += 1

        state.history.append(move_id)

        result = TransitionResult(
            move_id=move_id,
            player=player,
            phase=phase,
            wave=wave,
            sub_turn=sub_turn,
            damage=damage,
            phase_advanced=state.current_phase != phase or state.current_wave != wave,
            wave_advanced=state.current_wave != wave,
            result=state.result if result_before is None else None,
            log=self._describe(player, phase, wave, move, damage),
        )
        logger.debug(result.log)
        return result

    # ------------------------------------------------------------------#
    # Meta-moves
    # ------------------------------------------------------------------#
    def _pass_turn(self, state: GameState) -> None:
        state.current_player = state.current_player.opponent
        state.num_moves += 1
        state.engagement = state.engagement.declare()
        if state.num_moves > state.config.max_moves:
            raise MoveLimitExceeded(state.num_moves, state.config.max_moves, int(state.current_player))

    def _advance_phase(self, state: GameState) -> None:
        phase = state.current_phase
        if phase is Phase.AIR_TO_AIR:
            state.max_low_strike_attacks = min(
                state.count(Zone.LOW_STRIKE), state.config.low_strike_attack_cap
            )
        elif phase is Phase.GROUND_TO_AIR:
            state.max_active_sam_attacks = state.total(Zone.ACTIVE_SAM)
            state.max_passive_sam_attacks = state.total(Zone.PASSIVE_SAM)
            state.max_airbase_attacks = state.total(Zone.AIRBASE)

        if phase is Phase.LOW_STRIKE_ATTACK:
            self._start_next_wave(state)
        else:
            state.current_phase = Phase(phase + 1)

        state.engagement = state.engagement.declare()
        state.current_player = Player.BLUE

        if state.is_final_wave_over and state.result is None:
            state.result = self._outcome.evaluate(state)
            logger.info(
                "Game over after wave %d: %s (points %d-%d, hits %d-%d)",
                state.current_wave,
                state.result.name,
                state.blue_points,
                state.red_points,
                state.blue_hits,
                state.red_hits,
            )

    def _start_next_wave(self, state: GameState) -> None:
        """Reset quotas and rebuild placement pools from the survivors."""
        state.current_phase = Phase.PLACE_ESCORT
        state.current_wave += 1
        state.low_strike_attacks = 0
        state.active_sam_attacks = 0
        state.passive_sam_attacks = 0
        state.airbase_attacks = 0

        state.red_placeable_fighters = state.total(Zone.INTERCEPT) + state.count(Zone.AIRBASE)
        state.blue_placeable_fighters = state.blue_units()
        state.red_placeable_sams = state.total(Zone.ACTIVE_SAM) + state.total(Zone.PASSIVE_SAM)

        # Only fighters grounded in the airbase carry over on the board
        grounded = state.count(Zone.AIRBASE, evading=True)
        state.board = [0] * len(state.board)
        state.board[Zone.AIRBASE.attacking] = grounded

    # ------------------------------------------------------------------#
    # Placement (phases 0-4)
    # ------------------------------------------------------------------#
    def _place_escort(self, state: GameState, count: int) -> None:
        state.board[Zone.ESCORT.attacking] = count
        state.blue_placeable_fighters -= count
        state.current_phase = Phase.PLACE_HIGH_STRIKE

    def _place_high_strike(self, state: GameState, count: int) -> None:
        state.board[Zone.HIGH_STRIKE.attacking] = count
        state.blue_placeable_fighters -= count
        state.current_phase = Phase.PLACE_SEAD

    def _place_sead(self, state: GameState, count: int) -> None:
        state.board[Zone.SEAD.attacking] = count
        state.blue_placeable_fighters -= count
        state.board[Zone.LOW_STRIKE.attacking] = state.blue_placeable_fighters
        state.blue_placeable_fighters = 0
        state.num_moves += 1
        state.current_player = state.current_player.opponent
        state.current_phase = Phase.PLACE_INTERCEPT

    def _place_intercept(self, state: GameState, count: int) -> None:
        state.board[Zone.INTERCEPT.attacking] = count
        state.red_placeable_fighters -= count
        state.board[Zone.AIRBASE.attacking] = state.red_placeable_fighters
        state.red_placeable_fighters = 0
        state.current_phase = Phase.PLACE_SAMS

    def _place_sams(self, state: GameState, count: int) -> None:
        state.board[Zone.ACTIVE_SAM.attacking] = count
        state.red_placeable_sams -= count
        state.board[Zone.PASSIVE_SAM.attacking] = state.red_placeable_sams
        state.red_placeable_sams = 0
        state.board[Zone.AAA.attacking] = state.config.aaa_per_wave
        state.current_player = state.current_player.opponent
        state.current_phase = Phase.AIR_TO_AIR
        state.num_moves += 1

    # ------------------------------------------------------------------#
    # Air-to-air (phase 5)
    # ------------------------------------------------------------------#
    def _blue_air_declare(self, state: GameState, choice: int) -> None:
        # An escort fires at the interceptors and is spent for the phase
        if choice == ESCORT_ENGAGE:
            state.flip(Zone.ESCORT)
        state.engagement = state.engagement.resolve(Zone.INTERCEPT.attacking)
        state.current_player = Player.RED

    def _red_air_resolve(self, state: GameState, choice: int) -> Optional[DamageResult]:
        damage: Optional[DamageResult] = None
        if choice == RED_AIR_NO_DEFENCE:
            damage = take_hit(state, Player.RED, Zone.INTERCEPT.attacking)
        elif choice == RED_AIR_EVADE:
            damage = evade(state, Player.RED, Zone.INTERCEPT.attacking)
        state.engagement = state.engagement.declare()
        return damage

    def _red_air_declare(self, state: GameState, choice: int) -> None:
        target = RED_TARGETS[choice]
        state.engagement = state.engagement.resolve(target.attacking)
        state.flip(Zone.INTERCEPT)
        state.current_player = Player.BLUE

    def _blue_air_resolve(self, state: GameState, choice: int) -> Optional[DamageResult]:
        target = state.attacking_box
        damage: Optional[DamageResult] = None
        if choice == BLUE_AIR_NO_DEFENCE:
            damage = take_hit(state, Player.BLUE, target)
        elif choice == BLUE_AIR_ESCORT_EVADES:
            damage = inflict_damage(state, Player.BLUE, state.config.evade_damage, target)
            # The kill may already have taken the last attacking escort
            if state.count(Zone.ESCORT) > 0:
                state.flip(Zone.ESCORT)
        else:
            damage = evade(state, Player.BLUE, target)
        state.engagement = state.engagement.declare()
        return damage

    # ------------------------------------------------------------------#
    # Ground-to-air (phase 6)
    # ------------------------------------------------------------------#
    def _blue_ground_declare(self, state: GameState, choice: int) -> None:
        target = SEAD_TARGETS[choice]
        state.engagement = state.engagement.resolve(target.attacking)
        state.flip(Zone.SEAD)
        state.current_player = Player.RED

    def _red_ground_resolve(self, state: GameState, choice: int) -> Optional[DamageResult]:
        damage: Optional[DamageResult] = None
        if state.attacking_box == Zone.ACTIVE_SAM.attacking:
            damage = evade(state, Player.RED, Zone.ACTIVE_SAM.attacking)
        elif state.attacking_box == Zone.AAA.attacking:
            # SEAD suppresses the battery; no damage step
            state.flip(Zone.AAA)
        state.engagement = state.engagement.declare()
        return damage

    def _red_ground_declare(self, state: GameState, choice: int) -> None:
        if choice == RED_SAM_FIRE:
            state.engagement = state.engagement.resolve(Zone.HIGH_STRIKE.attacking)
            state.flip(Zone.ACTIVE_SAM)
        elif choice == RED_AAA_FIRE:
            # AAA volley: no resolve sub-turn for Blue, only the quota moves
            state.engagement = state.engagement.retarget(Zone.LOW_STRIKE.attacking)
            state.low_strike_attacks += 1
            state.flip(Zone.AAA)
        state.current_player = Player.BLUE

    def _blue_ground_resolve(self, state: GameState, choice: int) -> DamageResult:
        evade_damage = state.config.evade_damage
        high_strike = Zone.HIGH_STRIKE.attacking
        if choice == BLUE_GROUND_NO_DEFENCE:
            damage = take_hit(state, Player.BLUE, high_strike)
        elif choice == BLUE_GROUND_EVADE:
            damage = evade(state, Player.BLUE, high_strike)
        elif choice == BLUE_GROUND_SEAD_SUPPRESS:
            damage = inflict_damage(state, Player.BLUE, evade_damage, high_strike)
            state.flip(Zone.SEAD)
        else:
            damage = inflict_damage(state, Player.BLUE, evade_damage, Zone.LOW_STRIKE.attacking)
        state.engagement = state.engagement.declare()
        return damage

    # ------------------------------------------------------------------#
    # Air-to-ground (phases 7-9)
    # ------------------------------------------------------------------#
    def _strike(self, state: GameState, zone: Zone) -> DamageResult:
        """Blue strike on a ground zone: count it against the quota and damage Red."""
        if zone is Zone.AIRBASE:
            state.airbase_attacks += 1
        elif zone is Zone.ACTIVE_SAM:
            state.active_sam_attacks += 1
        elif zone is Zone.PASSIVE_SAM:
            state.passive_sam_attacks += 1
        target = state.strike_target(zone)
        state.engagement = state.engagement.retarget(target)
        return inflict_damage(state, Player.RED, state.config.strike_damage, target)

    def _high_strike_attack(self, state: GameState, choice: int) -> DamageResult:
        damage = self._strike(state, HIGH_STRIKE_TARGETS[choice])
        state.flip(Zone.HIGH_STRIKE)
        return damage

    def _uav_strike(self, state: GameState, choice: int) -> DamageResult:
        damage = self._strike(state, UAV_TARGETS[choice])
        state.current_phase = Phase.LOW_STRIKE_ATTACK
        return damage

    def _low_strike_attack(self, state: GameState, choice: int) -> Optional[DamageResult]:
        damage: Optional[DamageResult] = None
        if choice == LOW_STRIKE_SUPPRESS_AIRBASE:
            state.flip(Zone.AIRBASE)
        elif choice in LOW_STRIKE_TARGETS:
            damage = self._strike(state, LOW_STRIKE_TARGETS[choice])
        elif choice == LOW_STRIKE_GROUND_INTERCEPTOR:
            # Pins an interceptor in the airbase for the next wave
            if state.count(Zone.INTERCEPT) > 0:
                state.remove(Zone.INTERCEPT.attacking)
            else:
                state.remove(Zone.INTERCEPT.evading)
            state.add(Zone.AIRBASE.evading)
        state.flip(Zone.LOW_STRIKE)
        return damage

    # ------------------------------------------------------------------#
    # Helpers
    # ------------------------------------------------------------------#
    @staticmethod
    def _describe(
        player: Player,
        phase: Phase,
        wave: int,
        move: Move,
        damage: Optional[DamageResult],
    ) -> str:
        text = f"[wave {wave} {phase.name}] {player.display_name} {move}"
        if damage is not None:
            outcome = "KILL" if damage.killed else f"hits={damage.hits_after}"
            text += f" -> {damage.defender.display_name} takes {damage.amount} at slot {damage.target_slot} ({outcome})"
        return text
