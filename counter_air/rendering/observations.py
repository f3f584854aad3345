"""
Fixed-length feature vectors for learning agents.

Every state field is one-hot encoded into its own segment. Segment sizes are
derived from the GameConfig so every reachable value has a position; values
outside a segment are clamped to its last position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..core.moves import validate_player
from ..core.types import NUM_PLAYERS, NUM_SLOTS, Phase, SubTurn, Zone
from ..state import GameState


@dataclass(frozen=True)
class Segment:
    """A named slice of the observation vector."""

    name: str
    offset: int
    size: int
    value: Callable[[GameState], int]

    def encode(self, state: GameState, out: List[float]) -> None:
        index = min(max(self.value(state), 0), self.size - 1)
        out[self.offset + index] = 1.0


def _slot_sizes(config: GameConfig) -> Dict[Zone, int]:
    blue = config.blue_fighters + 1
    return {
        Zone.ESCORT: blue,
        Zone.HIGH_STRIKE: blue,
        Zone.SEAD: blue,
        Zone.LOW_STRIKE: blue,
        Zone.INTERCEPT: config.red_fighters + 1,
        Zone.ACTIVE_SAM: config.red_sams + 1,
        Zone.PASSIVE_SAM: config.red_sams + 1,
        Zone.AIRBASE: config.red_fighters + 1,
        Zone.AAA: config.aaa_per_wave + 1,
    }


def _slot_reader(slot: int) -> Callable[[GameState], int]:
    return lambda state: state.board[slot]


class ObservationEncoder:
    """
    Builds the observation vector for a given rules configuration.

    Attributes:
        config: Rules the segment sizes are derived from
        segments: Ordered segments; their sizes add up to ``size``
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.segments: Tuple[Segment, ...] = self._build_segments(self.config)
        last = self.segments[-1]
        self.size = last.offset + last.size

    @staticmethod
    def _build_segments(config: GameConfig) -> Tuple[Segment, ...]:
        specs: List[Tuple[str, int, Callable[[GameState], int]]] = []

        for zone, size in _slot_sizes(config).items():
            label = zone.name.lower()
            specs.append((f"{label}_attacking", size, _slot_reader(zone.attacking)))
            specs.append((f"{label}_evading", size, _slot_reader(zone.evading)))

        fighters, sams = config.red_fighters, config.red_sams
        specs += [
            ("wave", config.num_waves + 1, lambda s: s.current_wave),
            ("phase", len(Phase), lambda s: int(s.current_phase)),
            ("blue_hits", config.kill_threshold, lambda s: s.blue_hits),
            ("red_hits", config.kill_threshold, lambda s: s.red_hits),
            ("blue_points", fighters + sams + 1, lambda s: s.blue_points),
            ("red_points", config.blue_fighters + 1, lambda s: s.red_points),
            ("blue_placeable_fighters", config.blue_fighters + 1, lambda s: s.blue_placeable_fighters),
            ("red_placeable_fighters", fighters + 1, lambda s: s.red_placeable_fighters),
            ("red_placeable_sams", sams + 1, lambda s: s.red_placeable_sams),
            ("target", NUM_SLOTS, lambda s: s.attacking_box),
            ("sub_turn", len(SubTurn), lambda s: 0 if s.sub_turn is SubTurn.DECLARE else 1),
            ("current_player", NUM_PLAYERS, lambda s: int(s.current_player)),
            ("low_strike_attacks", config.low_strike_attack_cap + 1, lambda s: s.low_strike_attacks),
            ("max_low_strike_attacks", config.low_strike_attack_cap + 1, lambda s: s.max_low_strike_attacks),
            ("active_sam_attacks", sams + 1, lambda s: s.active_sam_attacks),
            ("max_active_sam_attacks", sams + 1, lambda s: s.max_active_sam_attacks),
            ("passive_sam_attacks", sams + 1, lambda s: s.passive_sam_attacks),
            ("max_passive_sam_attacks", sams + 1, lambda s: s.max_passive_sam_attacks),
            ("airbase_attacks", fighters + 1, lambda s: s.airbase_attacks),
            ("max_airbase_attacks", fighters + 1, lambda s: s.max_airbase_attacks),
        ]

        segments = []
        offset = 0
        for name, size, reader in specs:
            segments.append(Segment(name, offset, size, reader))
            offset += size
        return tuple(segments)

    def segment(self, name: str) -> Segment:
        for seg in self.segments:
            if seg.name == name:
                return seg
        raise KeyError(name)

    def encode(self, state: GameState) -> List[float]:
        values = [0.0] * self.size
        for seg in self.segments:
            seg.encode(state, values)
        return values


def observation_tensor(state: GameState, player: int) -> List[float]:
    """
    Observation vector of ``state`` as seen by ``player``.

    The game has perfect information, so both players get the same vector.

    Raises:
        InvalidPlayerError: If player is not 0 or 1
    """
    validate_player(player)
    return ObservationEncoder(state.config).encode(state)
