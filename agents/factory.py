"""
Build agent instances from AgentSpec definitions.
"""

from dataclasses import dataclass

from infra.logger import get_logger

from .base_agent import BaseAgent
from .registry import resolve_agent_class
from .spec import AgentSpec

logger = get_logger(__name__)


@dataclass
class PreparedAgent:
    """An instantiated agent together with the spec it was built from."""

    spec: AgentSpec
    agent: BaseAgent


def create_agent_from_spec(spec: AgentSpec) -> PreparedAgent:
    """
    Instantiate the agent class registered under ``spec.type``.

    Raises:
        ValueError: If the type is not registered
    """
    agent_cls = resolve_agent_class(spec.type)
    agent = agent_cls(spec.player, name=spec.name, **spec.init_params)
    logger.debug("Created %r from spec type '%s'", agent, spec.type)
    return PreparedAgent(spec=spec, agent=agent)
