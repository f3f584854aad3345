"""
OutcomeEvaluator - decides the winner once the last wave is over.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..core.types import GameResult

if TYPE_CHECKING:
    from ..state import GameState


class OutcomeEvaluator:
    """
    Stateless scoring rules.

    Blue must out-score Red by more than the win margin. At exactly the
    margin the damage accumulators break the tie; anything less is a Red win.
    """

    def evaluate(self, state: GameState) -> GameResult:
        return self.decide(
            blue_points=state.blue_points,
            red_points=state.red_points,
            blue_hits=state.blue_hits,
            red_hits=state.red_hits,
            win_margin=state.config.win_margin,
        )

    @staticmethod
    def decide(
        *,
        blue_points: int,
        red_points: int,
        blue_hits: int,
        red_hits: int,
        win_margin: int = 2,
    ) -> GameResult:
        """
        Pure scoring function.

        Examples:
            >>> OutcomeEvaluator.decide(blue_points=5, red_points=3, blue_hits=2, red_hits=1)
            <GameResult.BLUE_WINS: 'blue_wins'>
            >>> OutcomeEvaluator.decide(blue_points=5, red_points=3, blue_hits=1, red_hits=1)
            <GameResult.DRAW: 'draw'>
        """
        if blue_points > red_points + win_margin:
            return GameResult.BLUE_WINS
        if blue_points == red_points + win_margin:
            if blue_hits > red_hits:
                return GameResult.BLUE_WINS
            if blue_hits == red_hits:
                return GameResult.DRAW
            return GameResult.RED_WINS
        return GameResult.RED_WINS

    @staticmethod
    def returns(state: GameState) -> Tuple[float, float]:
        """(blue, red) returns; zero for both while the game is running."""
        if state.result is None:
            return (0.0, 0.0)
        return state.result.returns
