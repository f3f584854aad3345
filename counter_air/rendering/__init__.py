"""
Views of a Counter Air state for people and learning agents.
"""

from .observations import ObservationEncoder, Segment, observation_tensor
from .render_state import RenderStateBuilder
from .text import board_diagram, history_string, information_state_string, observation_string

__all__ = [
    "ObservationEncoder",
    "Segment",
    "observation_tensor",
    "RenderStateBuilder",
    "board_diagram",
    "history_string",
    "information_state_string",
    "observation_string",
]
