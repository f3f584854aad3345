"""
Declarative agent description, used by the runner and the launcher.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from counter_air.core.types import Player


class AgentSpec(BaseModel):
    """
    Which agent plays which side.

    Example:
        AgentSpec(type="random", player=Player.BLUE, init_params={"seed": 42})
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Registered agent type, e.g. 'random'.")
    player: Player = Field(description="Side the agent controls.")
    name: Optional[str] = Field(default=None, description="Display name (defaults to the class name).")
    init_params: Dict[str, Any] = Field(default_factory=dict, description="Extra constructor kwargs.")

    @field_validator("player", mode="before")
    @classmethod
    def _parse_player(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Player[value.upper()]
        return value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "player": self.player.name,
            "name": self.name,
            "init_params": dict(self.init_params),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AgentSpec":
        return cls.model_validate(data)
