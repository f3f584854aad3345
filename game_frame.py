from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from counter_air.environment import StepInfo
from counter_air.rendering import RenderStateBuilder
from counter_air.state import GameState


@dataclass(frozen=True)
class Frame:
    """
    Immutable snapshot of a single move, with helpers to serialize for transport.

    ``state`` is the position the move was chosen in, and the rendered
    ``last_move`` is the move played from it. The final frame of a game
    carries the terminal state and no move.
    """

    state: GameState
    move_id: Optional[int] = None
    move_metadata: Optional[Mapping[str, Any]] = None
    step_info: Optional[StepInfo] = None
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the frame into a JSON-friendly dictionary.
        """
        transition = self.step_info.transition if self.step_info else None
        frame: Dict[str, Any] = {
            "move_number": len(self.state.history),
            "state": self.state.to_dict(),
            "render": RenderStateBuilder.build(self.state, transition),
            "done": self.done,
        }

        if self.move_id is not None:
            frame["move"] = {
                "id": self.move_id,
                "label": transition.log if transition else str(self.move_id),
            }
        if self.move_metadata is not None:
            frame["move_metadata"] = dict(self.move_metadata)
        if self.step_info is not None:
            frame["step_info"] = self.step_info.to_dict()

        return frame
