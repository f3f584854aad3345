"""
Rules configuration.

The defaults are the standard Counter Air rules; every field can be
overridden for experiments, either directly or from ``COUNTER_AIR_*``
environment variables (a local ``.env`` file is honoured).
"""

from __future__ import annotations

import os
from typing import Any, Dict, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .core.types import PASS_TURN_ID

ENV_PREFIX = "COUNTER_AIR_"


class GameConfig(BaseModel):
    """Immutable rule constants for one game."""

    model_config = ConfigDict(frozen=True)

    blue_fighters: int = Field(
        default=10,
        ge=0,
        le=PASS_TURN_ID - 1,
        description="Blue fighters available at the start of the game.",
    )
    red_fighters: int = Field(default=4, ge=0, le=PASS_TURN_ID - 1, description="Red fighters at the start.")
    red_sams: int = Field(default=4, ge=0, le=PASS_TURN_ID - 1, description="Red SAM sites at the start.")
    aaa_per_wave: int = Field(default=4, ge=0, description="AAA batteries Red fields every wave.")
    num_waves: int = Field(default=5, ge=1, description="Waves played; the game ends when this many are done.")
    max_moves: int = Field(
        default=200,
        ge=1,
        description="Ceiling on recorded moves; passing it means the phase logic is looping.",
    )
    uav_waves: Tuple[int, ...] = Field(default=(0, 2), description="Waves in which the UAV phase is active.")
    low_strike_attack_cap: int = Field(
        default=4,
        ge=0,
        description="Upper bound on AAA volleys against Low Strike per wave.",
    )
    kill_threshold: int = Field(default=4, ge=1, description="Accumulated damage that destroys a unit.")
    evade_damage: int = Field(default=1, ge=0, description="Damage taken when the defender evades.")
    exposed_damage: int = Field(default=2, ge=0, description="Damage taken when the defender does nothing.")
    strike_damage: int = Field(default=1, ge=0, description="Damage of an air-to-ground or UAV strike.")
    win_margin: int = Field(default=2, ge=0, description="Points Blue must lead by to win outright.")

    @model_validator(mode="after")
    def _check_damage(self) -> "GameConfig":
        damages = (self.exposed_damage, self.evade_damage, self.strike_damage)
        if any(amount > self.kill_threshold for amount in damages):
            raise ValueError("A single hit cannot exceed the kill threshold")
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data["uav_waves"] = list(self.uav_waves)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameConfig:
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> GameConfig:
        """
        Build a config from ``COUNTER_AIR_<FIELD>`` variables.

        Args:
            env_file: Optional path to a dotenv file (default: search for .env)

        Raises:
            pydantic.ValidationError: If an override has the wrong type/range
        """
        load_dotenv(env_file)
        overrides: Dict[str, Any] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            if name == "uav_waves":
                overrides[name] = tuple(int(part) for part in raw.split(",") if part.strip())
            else:
                overrides[name] = raw
        return cls.model_validate(overrides)


DEFAULT_CONFIG = GameConfig()
