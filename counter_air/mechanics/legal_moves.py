"""
LegalMoveGenerator - enumerates the moves allowed in a state.

The generator is a pure function of the state. Each phase has its own
enumeration; when it yields nothing the generator falls back to the
advance-phase meta-move (phases that end on exhaustion) and finally to the
pass-turn meta-move, so a running game always has at least one legal move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List

from ..core.types import ADVANCE_PHASE_ID, PASS_TURN_ID, Phase, Player, SubTurn, Zone

if TYPE_CHECKING:
    from ..state import GameState


class LegalMoveGenerator:
    """Stateless legal-move enumeration, one method per phase."""

    def __init__(self):
        self._generators: Dict[Phase, Callable[[GameState], List[int]]] = {
            Phase.PLACE_ESCORT: self._blue_placement,
            Phase.PLACE_HIGH_STRIKE: self._blue_placement,
            Phase.PLACE_SEAD: self._blue_placement,
            Phase.PLACE_INTERCEPT: self._red_fighter_placement,
            Phase.PLACE_SAMS: self._red_sam_placement,
            Phase.AIR_TO_AIR: self._air_to_air,
            Phase.GROUND_TO_AIR: self._ground_to_air,
            Phase.HIGH_STRIKE_ATTACK: self._high_strike_attack,
            Phase.UAV: self._uav,
            Phase.LOW_STRIKE_ATTACK: self._low_strike_attack,
        }

    def legal_moves(self, state: GameState) -> List[int]:
        """
        Moves the current player may make, in ascending id order.

        Returns an empty list once the game is over.
        """
        if state.is_terminal:
            return []

        moves = self._generators[state.current_phase](state)
        if not moves:
            moves.append(PASS_TURN_ID)
        return moves

    def is_legal(self, state: GameState, move_id: int) -> bool:
        return move_id in self.legal_moves(state)

    # ------------------------------------------------------------------#
    # Placement (phases 0-4): any count from zero to the whole pool
    # ------------------------------------------------------------------#
    @staticmethod
    def _blue_placement(state: GameState) -> List[int]:
        return list(range(state.blue_placeable_fighters + 1))

    @staticmethod
    def _red_fighter_placement(state: GameState) -> List[int]:
        return list(range(state.red_placeable_fighters + 1))

    @staticmethod
    def _red_sam_placement(state: GameState) -> List[int]:
        return list(range(state.red_placeable_sams + 1))

    # ------------------------------------------------------------------#
    # Air-to-air (phase 5)
    # ------------------------------------------------------------------#
    @staticmethod
    def _air_to_air(state: GameState) -> List[int]:
        escort = state.count(Zone.ESCORT)
        high_strike = state.count(Zone.HIGH_STRIKE)
        low_strike = state.count(Zone.LOW_STRIKE)
        intercept = state.count(Zone.INTERCEPT)
        moves: List[int] = []

        if state.current_player is Player.BLUE:
            if state.sub_turn is SubTurn.DECLARE:
                if escort > 0 and intercept > 0:
                    moves.append(1)  # escort fires at the interceptors
            else:
                moves.append(0)  # no defence
                if escort > 0:
                    moves.append(1)  # escort evades
                if state.attacking_box == Zone.HIGH_STRIKE.attacking:
                    moves.append(2)  # high strike evades
                if state.attacking_box == Zone.LOW_STRIKE.attacking:
                    moves.append(3)  # low strike evades
        else:
            if state.sub_turn is SubTurn.DECLARE:
                if intercept > 0 and escort > 0:
                    moves.append(0)
                if intercept > 0 and high_strike > 0:
                    moves.append(1)
                if intercept > 0 and low_strike > 0:
                    moves.append(2)
            else:
                moves.extend([0, 1])  # no defence / evade

        no_targets = escort == 0 and high_strike == 0 and low_strike == 0
        if not moves and (intercept == 0 or no_targets):
            moves.append(ADVANCE_PHASE_ID)
        return moves

    # ------------------------------------------------------------------#
    # Ground-to-air (phase 6)
    # ------------------------------------------------------------------#
    @staticmethod
    def _ground_to_air(state: GameState) -> List[int]:
        high_strike = state.count(Zone.HIGH_STRIKE)
        sead = state.count(Zone.SEAD)
        low_strike = state.count(Zone.LOW_STRIKE)
        active_sam = state.count(Zone.ACTIVE_SAM)
        aaa = state.count(Zone.AAA)
        aaa_quota_open = state.low_strike_attacks < state.max_low_strike_attacks
        moves: List[int] = []

        if state.current_player is Player.BLUE:
            if state.sub_turn is SubTurn.DECLARE:
                if sead > 0:
                    if active_sam > 0:
                        moves.append(0)  # SEAD attacks an active SAM
                    if aaa > 0:
                        moves.append(1)  # SEAD attacks AAA
            else:
                if state.attacking_box == Zone.HIGH_STRIKE.attacking:
                    moves.extend([0, 1])  # no defence / high strike evades
                    if sead > 0:
                        moves.append(2)  # SEAD suppresses the SAM
                if state.attacking_box == Zone.LOW_STRIKE.attacking:
                    moves.append(3)
        else:
            if state.sub_turn is SubTurn.DECLARE:
                if active_sam > 0 and high_strike > 0:
                    moves.append(0)
                if aaa > 0 and low_strike > 0 and aaa_quota_open:
                    moves.append(1)
            else:
                moves.append(0)

        sams_idle = active_sam == 0 or high_strike == 0
        aaa_idle = aaa == 0 or low_strike == 0 or not aaa_quota_open
        sead_idle = sead == 0 or (active_sam == 0 and aaa == 0)
        if sams_idle and aaa_idle and sead_idle:
            moves.append(ADVANCE_PHASE_ID)
        return moves

    # ------------------------------------------------------------------#
    # Air-to-ground (phases 7-9)
    # ------------------------------------------------------------------#
    @staticmethod
    def _strikable(state: GameState, zone: Zone) -> bool:
        """A ground zone is strikable while occupied and its quota is open."""
        if state.total(zone) == 0:
            return False
        if zone is Zone.AIRBASE:
            return state.airbase_attacks < state.max_airbase_attacks
        if zone is Zone.ACTIVE_SAM:
            return state.active_sam_attacks < state.max_active_sam_attacks
        return state.passive_sam_attacks < state.max_passive_sam_attacks

    def _high_strike_attack(self, state: GameState) -> List[int]:
        moves: List[int] = []
        if state.count(Zone.HIGH_STRIKE) > 0:
            for choice, zone in enumerate((Zone.AIRBASE, Zone.ACTIVE_SAM, Zone.PASSIVE_SAM)):
                if self._strikable(state, zone):
                    moves.append(choice)
        return moves or [ADVANCE_PHASE_ID]

    def _uav(self, state: GameState) -> List[int]:
        moves: List[int] = []
        if state.current_wave in state.config.uav_waves:
            for choice, zone in enumerate((Zone.ACTIVE_SAM, Zone.PASSIVE_SAM)):
                if self._strikable(state, zone):
                    moves.append(choice)
        return moves or [ADVANCE_PHASE_ID]

    def _low_strike_attack(self, state: GameState) -> List[int]:
        moves: List[int] = []
        if state.count(Zone.LOW_STRIKE) > 0:
            if state.count(Zone.AIRBASE) > 0:
                moves.append(0)  # pin fighters on the ground
            if self._strikable(state, Zone.ACTIVE_SAM):
                moves.append(1)
            if self._strikable(state, Zone.PASSIVE_SAM):
                moves.append(2)
            if state.total(Zone.INTERCEPT) > 0:
                moves.append(3)  # force an interceptor back to the airbase
        return moves or [ADVANCE_PHASE_ID]
