"""
Functional API over the Counter Air rules.

These functions are what drivers and search code call. Queries never modify
the state; apply() works on a clone and returns it, apply_in_place() mutates
and returns the TransitionResult for callers that keep a single live state
(the environment, the runner).

Usage:
    state = new_game()
    while not is_terminal(state):
        state = apply(state, legal_moves(state)[0])
    print(returns(state))
"""

from __future__ import annotations

from typing import List, Tuple

from .config import GameConfig
from .core.moves import move_to_string
from .core.types import TERMINAL_PLAYER_ID
from .errors import IllegalMoveError
from .mechanics import LegalMoveGenerator, OutcomeEvaluator, PhaseController, TransitionResult
from .state import GameState

# Stateless collaborators shared by every call
_legal = LegalMoveGenerator()
_outcome = OutcomeEvaluator()
_controller = PhaseController(_outcome)


def new_game(config: GameConfig | None = None) -> GameState:
    return GameState.initial(config)


def current_player(state: GameState) -> int:
    """Id of the side to move, or TERMINAL_PLAYER_ID once the game is over."""
    if state.is_terminal:
        return TERMINAL_PLAYER_ID
    return int(state.current_player)


def legal_moves(state: GameState) -> List[int]:
    return _legal.legal_moves(state)


def apply_in_place(state: GameState, move_id: int) -> TransitionResult:
    """
    Apply a move to the given state.

    Raises:
        IllegalMoveError: If move_id is not in legal_moves(state)
        MoveLimitExceeded: If a pass pushes the move counter past the ceiling
    """
    legal = _legal.legal_moves(state)
    if move_id not in legal:
        raise IllegalMoveError(
            move_id,
            current_player(state),
            int(state.current_phase),
            state.current_wave,
            legal,
        )
    return _controller.apply(state, move_id)


def apply(state: GameState, move_id: int) -> GameState:
    """Return the successor state; the input is left untouched."""
    child = state.clone()
    apply_in_place(child, move_id)
    return child


def is_terminal(state: GameState) -> bool:
    return state.is_terminal


def returns(state: GameState) -> Tuple[float, float]:
    """(blue, red) returns; (0.0, 0.0) until the game is over."""
    return _outcome.returns(state)


def clone(state: GameState) -> GameState:
    return state.clone()


__all__ = [
    "new_game",
    "current_player",
    "legal_moves",
    "apply",
    "apply_in_place",
    "is_terminal",
    "returns",
    "clone",
    "move_to_string",
]
