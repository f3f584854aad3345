"""
Agent interface and implementations for Counter Air.

This module provides:
- BaseAgent: Abstract interface for all agents
- RandomAgent: Uniform random legal move, for testing
- FirstMoveAgent: Lowest legal move id, for reproducible games
"""

from .base_agent import BaseAgent
from .factory import PreparedAgent, create_agent_from_spec

from .registry import register_agent, registered_agent_types, resolve_agent_class
from .spec import AgentSpec
from .random_agent import RandomAgent
from .first_move_agent import FirstMoveAgent

__all__ = [
    "BaseAgent",
    "AgentSpec",
    "PreparedAgent",
    "create_agent_from_spec",
    "register_agent",
    "registered_agent_types",
    "resolve_agent_class",
    "RandomAgent",
    "FirstMoveAgent",
]
