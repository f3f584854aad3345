"""
Base agent interface for Counter Air.

All agents must implement this interface to play through the environment.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

from counter_air import game
from counter_air.core.types import Player
from counter_air.state import GameState

if TYPE_CHECKING:
    from counter_air.environment import StepInfo


class BaseAgent(ABC):
    """
    Abstract base class for all agents.

    Subclasses must implement:
    - select_move(): Pick one legal move id for the side to move

    Attributes:
        player: The side this agent controls (BLUE or RED)
        name: Agent name for logging/identification
    """

    def __init__(self, player: Player, name: str = None):
        """
        Initialize the agent.

        Args:
            player: Side this agent controls
            name: Optional name for the agent (defaults to class name)
        """
        self.player = Player(player)
        self.name = name or self.__class__.__name__

    @abstractmethod
    def select_move(
        self,
        state: GameState,
        step_info: Optional["StepInfo"] = None,
        **kwargs: Any,
    ) -> tuple[int, Dict[str, Any]]:
        """
        Choose a move for the current position.

        Called only when it is this agent's turn. The game has perfect
        information, so the full state is visible; agents that search must
        explore on state.clone() copies, never on the live object.

        Args:
            state: Live game state from the environment
            step_info: Optional info about the previous move
            **kwargs: Reserved for future fields (e.g., injections)

        Returns:
            Tuple of:
                - A move id from game.legal_moves(state)
                - Metadata dict (reasoning/logs/etc.)
        """
        pass

    def legal_moves(self, state: GameState) -> list[int]:
        return game.legal_moves(state)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} ({self.player.name})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"{self.__class__.__name__}(player={self.player.name}, name='{self.name}')"
