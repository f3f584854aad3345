"""
Counter Air - a deterministic two-player air-war rules engine.

Blue flies five waves of strike packages against Red's interceptors, SAM
sites and AAA. Each wave runs ten phases: five of force placement, then
air-to-air, ground-to-air, high strike, UAV and low strike. Damage is
quantized, so the game has no chance nodes and perfect information.

Quick Start:
    from counter_air import game

    state = game.new_game()
    while not game.is_terminal(state):
        state = game.apply(state, game.legal_moves(state)[0])
    print(game.returns(state))

or, through the gym-like environment:

    from counter_air import CounterAirEnv

    env = CounterAirEnv()
    obs = env.reset()
    obs, rewards, done, info = env.step(obs["legal_moves"][0])
"""

__version__ = "1.0.0"

from . import game
from .config import DEFAULT_CONFIG, GameConfig
from .core import (
    ADVANCE_PHASE_ID,
    NUM_DISTINCT_MOVES,
    PASS_TURN_ID,
    TERMINAL_PLAYER_ID,
    GameResult,
    Move,
    MoveType,
    Phase,
    Player,
    SubTurn,
    Zone,
)
from .environment import CounterAirEnv, StepInfo
from .errors import (
    CounterAirError,
    IllegalMoveError,
    InvalidPlayerError,
    InvariantViolation,
    MoveLimitExceeded,
)
from .mechanics import TransitionResult
from .rendering import ObservationEncoder, RenderStateBuilder, board_diagram
from .state import Engagement, GameState

__all__ = [
    "game",
    "DEFAULT_CONFIG",
    "GameConfig",
    "ADVANCE_PHASE_ID",
    "NUM_DISTINCT_MOVES",
    "PASS_TURN_ID",
    "TERMINAL_PLAYER_ID",
    "GameResult",
    "Move",
    "MoveType",
    "Phase",
    "Player",
    "SubTurn",
    "Zone",
    "CounterAirEnv",
    "StepInfo",
    "CounterAirError",
    "IllegalMoveError",
    "InvalidPlayerError",
    "InvariantViolation",
    "MoveLimitExceeded",
    "TransitionResult",
    "ObservationEncoder",
    "RenderStateBuilder",
    "board_diagram",
    "Engagement",
    "GameState",
]
