"""
Random agent implementation for testing and baseline comparison.

This agent picks uniformly among the legal moves.
"""

import random
from typing import Any, Dict, Optional, TYPE_CHECKING

from counter_air.core.types import Player
from counter_air.state import GameState

from ..base_agent import BaseAgent
from ..registry import register_agent

if TYPE_CHECKING:
    from counter_air.environment import StepInfo


@register_agent("random")
class RandomAgent(BaseAgent):
    """
    Agent that takes random moves.

    This serves as a baseline for comparing search or learning agents.
    """

    def __init__(
        self,
        player: Player,
        name: str = None,
        seed: Optional[int] = None,
        **_: Any,
    ):
        """
        Initialize random agent.

        Args:
            player: Side to control
            name: Agent name (default: "RandomAgent")
            seed: Random seed for reproducibility (None = random)
        """
        super().__init__(player, name)
        self.rng = random.Random(seed)

    def select_move(
        self,
        state: GameState,
        step_info: Optional["StepInfo"] = None,
        **kwargs: Any,
    ) -> tuple[int, Dict[str, Any]]:
        legal = self.legal_moves(state)
        if not legal:
            raise ValueError("No legal moves: the game is over")
        move_id = self.rng.choice(legal)
        metadata = {
            "policy": "random",
            "legal_count": len(legal),
            "injections": {**kwargs},
        }
        return move_id, metadata
