"""
GameState - the board ledger.

Holds the 18 zone-slot counters and every scalar counter of a game. The
ledger has no rules of its own: it is mutated only by the PhaseController,
which relies on the LegalMoveGenerator to guarantee that a counter is never
decremented below zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .core.types import NUM_SLOTS, GameResult, Phase, Player, SubTurn, Zone


@dataclass(frozen=True)
class Engagement:
    """
    Position inside the current combat exchange.

    Attributes:
        sub_turn: DECLARE when the next move picks a target, RESOLVE when it
            answers the attack just declared
        target: Slot index of the unit under attack
    """

    sub_turn: SubTurn = SubTurn.DECLARE
    # First attack of a game is against the red intercept box.
    target: int = Zone.INTERCEPT.attacking

    def declare(self) -> Engagement:
        """Back to the declare sub-turn, keeping the last target."""
        return Engagement(SubTurn.DECLARE, self.target)

    def resolve(self, target: int) -> Engagement:
        return Engagement(SubTurn.RESOLVE, target)

    def retarget(self, target: int) -> Engagement:
        return Engagement(self.sub_turn, target)


@dataclass
class GameState:
    """
    Complete state of one Counter Air game.

    Instances are cheap to copy with clone(); search code should explore
    alternatives on clones, never on a shared instance.
    """

    board: List[int] = field(default_factory=lambda: [0] * NUM_SLOTS)
    current_player: Player = Player.BLUE
    current_phase: Phase = Phase.PLACE_ESCORT
    current_wave: int = 0
    num_moves: int = 0

    # Damage accumulated against each side, always in [0, kill_threshold)
    blue_hits: int = 0
    red_hits: int = 0
    blue_points: int = 0
    red_points: int = 0

    # Placement pools
    blue_placeable_fighters: int = DEFAULT_CONFIG.blue_fighters
    red_placeable_fighters: int = DEFAULT_CONFIG.red_fighters
    red_placeable_sams: int = DEFAULT_CONFIG.red_sams

    engagement: Engagement = field(default_factory=Engagement)

    # Per-wave attack quotas; max_* are frozen at phase boundaries
    low_strike_attacks: int = 0
    max_low_strike_attacks: int = 0
    active_sam_attacks: int = 0
    max_active_sam_attacks: int = 0
    passive_sam_attacks: int = 0
    max_passive_sam_attacks: int = 0
    airbase_attacks: int = 0
    max_airbase_attacks: int = 0

    result: Optional[GameResult] = None
    history: List[int] = field(default_factory=list)
    config: GameConfig = DEFAULT_CONFIG

    @classmethod
    def initial(cls, config: GameConfig | None = None) -> GameState:
        """Fresh game with placement pools taken from the config."""
        config = config or DEFAULT_CONFIG
        return cls(
            blue_placeable_fighters=config.blue_fighters,
            red_placeable_fighters=config.red_fighters,
            red_placeable_sams=config.red_sams,
            config=config,
        )

    # ------------------------------------------------------------------#
    # Ledger helpers
    # ------------------------------------------------------------------#
    def count(self, zone: Zone, evading: bool = False) -> int:
        return self.board[zone.evading if evading else zone.attacking]

    def total(self, zone: Zone) -> int:
        """Attacking plus evading units in a zone."""
        return self.board[zone.attacking] + self.board[zone.evading]

    def flip(self, zone: Zone) -> None:
        """Move one unit from the attacking to the evading slot of a zone."""
        self.board[zone.attacking] -= 1
        self.board[zone.evading] += 1

    def flip_slot(self, slot: int) -> None:
        """flip() addressed by the attacking slot index."""
        self.flip(Zone.of_slot(slot))

    def remove(self, slot: int) -> None:
        self.board[slot] -= 1

    def add(self, slot: int, amount: int = 1) -> None:
        self.board[slot] += amount

    def strike_target(self, zone: Zone) -> int:
        """Attacking slot when occupied, otherwise the evading slot."""
        return zone.attacking if self.board[zone.attacking] > 0 else zone.evading

    # ------------------------------------------------------------------#
    # Derived views
    # ------------------------------------------------------------------#
    @property
    def sub_turn(self) -> SubTurn:
        return self.engagement.sub_turn

    @property
    def is_attacking(self) -> bool:
        return self.engagement.sub_turn is SubTurn.DECLARE

    @property
    def attacking_box(self) -> int:
        return self.engagement.target

    @property
    def is_final_wave_over(self) -> bool:
        return self.current_wave >= self.config.num_waves

    @property
    def is_terminal(self) -> bool:
        return self.result is not None or self.is_final_wave_over

    def blue_units(self) -> int:
        """Blue fighters currently on the board (Escort..Low Strike)."""
        return sum(self.board[Zone.ESCORT.attacking:Zone.LOW_STRIKE.evading + 1])

    def red_units(self) -> int:
        """Red fighters and SAMs currently on the board (AAA excluded)."""
        return sum(self.board[Zone.INTERCEPT.attacking:Zone.AIRBASE.evading + 1])

    # ------------------------------------------------------------------#
    # Copy / serialization
    # ------------------------------------------------------------------#
    def clone(self) -> GameState:
        """Independent copy; mutable containers are duplicated."""
        return replace(self, board=list(self.board), history=list(self.history))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict (enums as names/values)."""
        return {
            "board": list(self.board),
            "current_player": int(self.current_player),
            "current_phase": int(self.current_phase),
            "current_wave": self.current_wave,
            "num_moves": self.num_moves,
            "blue_hits": self.blue_hits,
            "red_hits": self.red_hits,
            "blue_points": self.blue_points,
            "red_points": self.red_points,
            "blue_placeable_fighters": self.blue_placeable_fighters,
            "red_placeable_fighters": self.red_placeable_fighters,
            "red_placeable_sams": self.red_placeable_sams,
            "sub_turn": self.engagement.sub_turn.value,
            "is_attacking": self.is_attacking,
            "attacking_box": self.attacking_box,
            "low_strike_attacks": self.low_strike_attacks,
            "max_low_strike_attacks": self.max_low_strike_attacks,
            "active_sam_attacks": self.active_sam_attacks,
            "max_active_sam_attacks": self.max_active_sam_attacks,
            "passive_sam_attacks": self.passive_sam_attacks,
            "max_passive_sam_attacks": self.max_passive_sam_attacks,
            "airbase_attacks": self.airbase_attacks,
            "max_airbase_attacks": self.max_airbase_attacks,
            "result": self.result.value if self.result else None,
            "history": list(self.history),
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        """
        Rebuild a state from to_dict() output.

        Raises:
            ValueError: If the board does not have exactly 18 slots
        """
        board = list(data["board"])
        if len(board) != NUM_SLOTS:
            raise ValueError(f"Board must have {NUM_SLOTS} slots, got {len(board)}")

        if "sub_turn" in data:
            sub_turn = SubTurn(data["sub_turn"])
        else:
            sub_turn = SubTurn.DECLARE if data.get("is_attacking", True) else SubTurn.RESOLVE

        config_data = data.get("config")
        config = GameConfig.from_dict(config_data) if config_data else DEFAULT_CONFIG
        result = data.get("result")

        return cls(
            board=board,
            current_player=Player(data["current_player"]),
            current_phase=Phase(data["current_phase"]),
            current_wave=data["current_wave"],
            num_moves=data.get("num_moves", 0),
            blue_hits=data.get("blue_hits", 0),
            red_hits=data.get("red_hits", 0),
            blue_points=data.get("blue_points", 0),
            red_points=data.get("red_points", 0),
            blue_placeable_fighters=data.get("blue_placeable_fighters", 0),
            red_placeable_fighters=data.get("red_placeable_fighters", 0),
            red_placeable_sams=data.get("red_placeable_sams", 0),
            engagement=Engagement(sub_turn, data.get("attacking_box", Zone.INTERCEPT.attacking)),
            low_strike_attacks=data.get("low_strike_attacks", 0),
            max_low_strike_attacks=data.get("max_low_strike_attacks", 0),
            active_sam_attacks=data.get("active_sam_attacks", 0),
            max_active_sam_attacks=data.get("max_active_sam_attacks", 0),
            passive_sam_attacks=data.get("passive_sam_attacks", 0),
            max_passive_sam_attacks=data.get("max_passive_sam_attacks", 0),
            airbase_attacks=data.get("airbase_attacks", 0),
            max_airbase_attacks=data.get("max_airbase_attacks", 0),
            result=GameResult(result) if result else None,
            history=list(data.get("history", [])),
            config=config,
        )

    def __str__(self) -> str:
        return (
            f"GameState(wave={self.current_wave}, phase={self.current_phase.name}, "
            f"player={self.current_player.name}, sub_turn={self.sub_turn.name}, "
            f"points={self.blue_points}-{self.red_points})"
        )
