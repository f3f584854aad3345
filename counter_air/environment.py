"""
CounterAirEnv - Main environment interface.

A gym-like wrapper around the functional API for drivers that keep a single
live game: agents, the GameRunner, training loops.

Usage:
    from counter_air import CounterAirEnv

    env = CounterAirEnv()
    state = env.reset()

    done = False
    while not done:
        move_id, _metadata = agent.select_move(state["state"])  # Your AI here
        state, rewards, done, info = env.step(move_id)

    print(f"Result: {env.result}")

State Structure:
    {
        "state": GameState,      # Live state object (clone before exploring)
        "player": int,           # Side to move, TERMINAL_PLAYER_ID when over
        "legal_moves": List[int]
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from infra.logger import get_logger

from . import game
from .config import GameConfig
from .core.types import GameResult, Player
from .mechanics import TransitionResult
from .rendering import board_diagram
from .state import GameState

logger = get_logger(__name__)


@dataclass
class StepInfo:
    """
    Per-step metadata returned at the end of each step.

    Contains the transition record of the applied move and the rewards it
    produced. The full state is still returned in `state`.
    """

    transition: TransitionResult
    rewards: Dict[Player, float]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize step info to a plain dict."""
        return {
            "transition": self.transition.to_dict(),
            "rewards": {player.name: value for player, value in self.rewards.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StepInfo:
        """Deserialize step info from a dict."""
        return cls(
            transition=TransitionResult.from_dict(data["transition"]),
            rewards={Player[name]: value for name, value in data["rewards"].items()},
        )


class CounterAirEnv:
    """
    Counter Air Environment - Main simulation interface.

    Attributes:
        config: Rules for every game played in this environment
        state: Current game state (None until reset())
        verbose: Log every move at INFO instead of DEBUG
    """

    def __init__(self, config: GameConfig | None = None, verbose: bool = False):
        self.config = config
        self.verbose = verbose
        self.state: Optional[GameState] = None

    def reset(self, state: GameState | Dict[str, Any] | None = None) -> Dict[str, Any]:
        """
        Start a new game, or resume from a saved state.

        Args:
            state: Optional GameState or dict from GameState.to_dict(). It is
                copied, so the caller's object is never modified.

        Returns:
            Initial state (same structure as step())
        """
        if state is None:
            self.state = game.new_game(self.config)
        elif isinstance(state, GameState):
            self.state = state.clone()
        else:
            self.state = GameState.from_dict(state)
        return self._build_state()

    def step(self, move_id: int) -> Tuple[Dict[str, Any], Dict[Player, float], bool, StepInfo]:
        """
        Apply one move for the side to move.

        Args:
            move_id: Wire id from legal_moves()

        Returns:
            Tuple of (state, rewards, done, info):
            - state: Dict - see module docstring
            - rewards: Dict[Player, float] - reward signal for each side
            - done: bool - whether the game is over
            - info: StepInfo - transition metadata

        Raises:
            RuntimeError: If reset() hasn't been called
            IllegalMoveError: If move_id is not legal
            MoveLimitExceeded: If the move ceiling is passed
        """
        if self.state is None:
            raise RuntimeError("Must call reset() before calling step()")

        transition = game.apply_in_place(self.state, move_id)
        if self.verbose:
            logger.info(transition.log)

        done = self.is_game_over
        rewards = self._calculate_rewards()
        if transition.result is not None:
            logger.info(
                "Game finished: %s after %d moves",
                transition.result.name,
                len(self.state.history),
            )
            if self.verbose:
                logger.info("Final board:\n%s", board_diagram(self.state))

        return self._build_state(), rewards, done, StepInfo(transition=transition, rewards=rewards)

    def legal_moves(self) -> List[int]:
        if self.state is None:
            raise RuntimeError("Must call reset() before calling legal_moves()")
        return game.legal_moves(self.state)

    def _build_state(self) -> Dict[str, Any]:
        return {
            "state": self.state,
            "player": game.current_player(self.state),
            "legal_moves": game.legal_moves(self.state),
        }

    def _calculate_rewards(self) -> Dict[Player, float]:
        """
        Rewards for each side.

        - Win: +1.0
        - Loss: -1.0
        - Draw: 0.0
        - In progress: 0.0
        """
        blue, red = game.returns(self.state)
        return {Player.BLUE: blue, Player.RED: red}

    def render(self) -> str:
        if self.state is None:
            raise RuntimeError("Must call reset() before calling render()")
        return board_diagram(self.state)

    def close(self) -> None:
        """
        Clean up resources.

        Currently a no-op, but provided for gym compatibility.
        """

    @property
    def current_player(self) -> int:
        if self.state is None:
            raise RuntimeError("Must call reset() before reading current_player")
        return game.current_player(self.state)

    @property
    def is_game_over(self) -> bool:
        """Check if game is over."""
        return self.state is not None and self.state.is_terminal

    @property
    def result(self) -> Optional[GameResult]:
        """Final result (None while in progress)."""
        return self.state.result if self.state else None
