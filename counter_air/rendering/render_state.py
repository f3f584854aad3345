"""
Helper utilities for converting game state into render-friendly payloads.

Replay viewers and log sinks expect plain JSON data. The builder in this
module turns a GameState (and the move that produced it) into a
serializable dict with the board grouped by zone.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.types import Zone
from ..mechanics.transitions import TransitionResult
from ..state import GameState
from .text import board_diagram


class RenderStateBuilder:
    """Build JSON-serializable render state snapshots."""

    @staticmethod
    def build(state: GameState, transition: Optional[TransitionResult] = None) -> Dict[str, Any]:
        """
        Convert a state and the last transition into a JSON-friendly dict.

        Args:
            state: Current game state
            transition: Move that produced the state (None for the initial state)

        Returns:
            Dictionary ready to dump as JSON
        """
        return {
            "wave": state.current_wave,
            "phase": state.current_phase.name,
            "player": state.current_player.name,
            "sub_turn": state.sub_turn.value,
            "target": state.attacking_box,
            "num_moves": state.num_moves,
            "game_over": state.is_terminal,
            "result": state.result.value if state.result else None,
            "score": {
                "blue_points": state.blue_points,
                "red_points": state.red_points,
                "blue_hits": state.blue_hits,
                "red_hits": state.red_hits,
            },
            "zones": RenderStateBuilder._serialize_zones(state),
            "last_move": transition.to_dict() if transition else None,
            "diagram": board_diagram(state),
        }

    @staticmethod
    def _serialize_zones(state: GameState) -> Dict[str, Dict[str, int]]:
        return {
            zone.name.lower(): {
                "attacking": state.count(zone),
                "evading": state.count(zone, evading=True),
            }
            for zone in Zone
        }
