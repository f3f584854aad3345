"""
Text views of a game state.

board_diagram() draws the nine zones in their tabletop arrangement, each cell
showing the attacking and evading counts side by side, followed by a strip
of the scalar counters with a two-letter legend.
"""

from __future__ import annotations

from typing import List

from ..core.moves import validate_player
from ..state import GameState

# Legend for the counter strip, in display order
COUNTER_LEGEND = (
    "CW", "CP", "NM", "BH", "RH", "BP", "RP", "BF", "RF", "RS",
    "PL", "LS", "ML", "AS", "MA", "PS", "MP", "AB", "MB",
)


def _cell(state: GameState, slot: int) -> str:
    return f"{state.board[slot]}{state.board[slot + 1]}"


def _counters(state: GameState) -> List[int]:
    return [
        state.current_wave,
        int(state.current_phase),
        state.num_moves,
        state.blue_hits,
        state.red_hits,
        state.blue_points,
        state.red_points,
        state.blue_placeable_fighters,
        state.red_placeable_fighters,
        state.red_placeable_sams,
        int(state.current_player),
        state.low_strike_attacks,
        state.max_low_strike_attacks,
        state.active_sam_attacks,
        state.max_active_sam_attacks,
        state.passive_sam_attacks,
        state.max_passive_sam_attacks,
        state.airbase_attacks,
        state.max_airbase_attacks,
    ]


def board_diagram(state: GameState) -> str:
    """
    Multi-line picture of the board.

    Layout (each cell is attacking+evading)::

        ┌──┬──┬──┐
        │Es│  │  │
        ├──┤HS│In│
        │SD│  │  │
        ├──┴──┼──┤
        │ LS  │AS│
        ├──┬──┼──┤
        │AA│AB│PS│
        └──┴──┴──┘
    """
    lines = [
        "┌──┬──┬──┐",
        f"│{_cell(state, 0)}│  │  │",
        f"├──┤{_cell(state, 2)}│{_cell(state, 8)}│",
        f"│{_cell(state, 4)}│  │  │",
        "├──┴──┼──┤",
        f"│ {_cell(state, 6)}  │{_cell(state, 10)}│",
        "├──┬──┼──┤",
        f"│{_cell(state, 16)}│{_cell(state, 14)}│{_cell(state, 12)}│",
        "└──┴──┴──┘",
        " │".join(str(value) for value in _counters(state)),
        "│".join(COUNTER_LEGEND),
    ]
    return "\n".join(lines)


def observation_string(state: GameState, player: int) -> str:
    """Perfect-information view: both players see the full board."""
    validate_player(player)
    return board_diagram(state)


def history_string(state: GameState) -> str:
    return ", ".join(str(move_id) for move_id in state.history)


def information_state_string(state: GameState, player: int) -> str:
    """The move history, which identifies the information state."""
    validate_player(player)
    return history_string(state)
