"""
Name -> class registry so agents can be built from declarative specs.
"""

from typing import Callable, Dict, Type, TypeVar

from .base_agent import BaseAgent

AgentT = TypeVar("AgentT", bound=Type[BaseAgent])

_AGENT_REGISTRY: Dict[str, Type[BaseAgent]] = {}


def register_agent(name: str) -> Callable[[AgentT], AgentT]:
    """
    Class decorator registering an agent under ``name``.

    Raises:
        ValueError: If another class already uses the name
    """

    def decorator(cls: AgentT) -> AgentT:
        existing = _AGENT_REGISTRY.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"Agent type '{name}' already registered by {existing.__name__}")
        _AGENT_REGISTRY[name] = cls
        return cls

    return decorator


def resolve_agent_class(name: str) -> Type[BaseAgent]:
    try:
        return _AGENT_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_AGENT_REGISTRY)) or "none"
        raise ValueError(f"Unknown agent type '{name}' (registered: {known})") from None


def registered_agent_types() -> list[str]:
    return sorted(_AGENT_REGISTRY)
