"""
Deterministic agent that always plays the lowest legal move id.

Useful for reproducible games in tests: in placement phases it places
nothing, so pools roll over into Low Strike, Airbase and Passive SAM.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

from counter_air.state import GameState

from ..base_agent import BaseAgent
from ..registry import register_agent

if TYPE_CHECKING:
    from counter_air.environment import StepInfo


@register_agent("first")
class FirstMoveAgent(BaseAgent):

    def select_move(
        self,
        state: GameState,
        step_info: Optional["StepInfo"] = None,
        **kwargs: Any,
    ) -> tuple[int, Dict[str, Any]]:
        legal = self.legal_moves(state)
        if not legal:
            raise ValueError("No legal moves: the game is over")
        return legal[0], {"policy": "first"}
