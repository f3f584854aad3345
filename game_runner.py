from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from agents import AgentSpec, PreparedAgent, create_agent_from_spec
from counter_air.config import GameConfig
from counter_air.core.types import GameResult, Player
from counter_air.environment import CounterAirEnv, StepInfo
from counter_air.state import GameState
from infra.logger import get_logger

from game_frame import Frame

logger = get_logger(__name__)


class GameRunner:
    """
    Step-by-step game runner that returns UI-friendly frames.

    Call step() until the returned frame is done, or run() to play the whole
    game. Each step asks the agent of the side to move for one move.
    """

    def __init__(
        self,
        agents: Sequence[AgentSpec],
        config: GameConfig | None = None,
        state: GameState | Dict[str, Any] | None = None,
        verbose: bool = False,
    ):
        self.config = config
        self.verbose = verbose

        self.env = CounterAirEnv(config=config, verbose=verbose)
        self._state = self.env.reset(state)

        self._agents: Dict[Player, PreparedAgent] = {
            player: self._agent_for(agents, player) for player in Player
        }

        self._done = self.env.is_game_over
        self._last_info: StepInfo | None = None
        self._final_state: GameState | None = None

    # ------------------------------------------------------------------#
    # Properties
    # ------------------------------------------------------------------#
    @property
    def state(self) -> Dict[str, Any]:
        return self._state

    @property
    def done(self) -> bool:
        return self._done

    @property
    def move_count(self) -> int:
        return len(self._state["state"].history)

    @property
    def result(self) -> Optional[GameResult]:
        return self.env.result

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def step(self, injections: Optional[Dict[str, Any]] = None) -> Frame:
        """
        Play one move and return a frame of the position it was played in.

        After the last move, one more call returns the terminal frame.

        Args:
            injections: Optional dict with 'blue'/'red' keys for agent kwargs.
        """
        if self._done:
            if self._final_state is not None:
                final_state = self._final_state
                self._final_state = None
                return Frame(state=final_state, done=True)
            raise RuntimeError("Game is already finished")

        injections = injections or {}
        live: GameState = self._state["state"]
        state_before = live.clone()

        prepared = self._agents[live.current_player]
        move_id, metadata = prepared.agent.select_move(
            live,
            step_info=self._last_info,
            **injections.get(prepared.agent.player.name.lower(), {}),
        )

        self._state, _rewards, self._done, self._last_info = self.env.step(move_id)

        if self._done:
            self._final_state = self._state["state"].clone()

        return Frame(
            state=state_before,
            move_id=move_id,
            move_metadata=metadata,
            step_info=self._last_info,
            done=False,
        )

    def run(self, *, include_history: bool = False) -> Frame | List[Frame]:
        """
        Run the full game to completion.

        Returns the final frame, or the full frame history if include_history
        is True.
        """
        frames: List[Frame] = []
        while True:
            frame = self.step()
            frames.append(frame)
            if frame.done:
                break

        return frames if include_history else frames[-1]

    def get_final_frame(self) -> Frame:
        """Current state without a move, for terminal views."""
        return Frame(state=self._state["state"].clone(), done=self._done)

    # Helpers
    @staticmethod
    def _agent_for(agents: Sequence[AgentSpec], player: Player) -> PreparedAgent:
        matches = [spec for spec in agents if spec.player == player]
        if not matches:
            raise ValueError(f"No AgentSpec found for player {player.name}")
        if len(matches) > 1:
            raise ValueError(f"Multiple AgentSpecs found for player {player.name}")
        return create_agent_from_spec(matches[0])


def run_single_game(
    agents: Sequence[AgentSpec],
    config: GameConfig | None = None,
    verbose: bool = False,
) -> GameState:
    """Play one game and return its terminal state."""
    runner = GameRunner(agents, config=config, verbose=verbose)
    final = runner.run()
    return final.state  # type: ignore[union-attr]


def run_multiple_games(
    agents: Sequence[AgentSpec],
    num_games: int,
    config: GameConfig | None = None,
) -> Dict[str, int]:
    """
    Play ``num_games`` games and tally the results.

    Agents are rebuilt for every game, so seeded agents replay identically.
    """
    tally = {result.value: 0 for result in GameResult}
    for index in range(num_games):
        state = run_single_game(agents, config=config)
        tally[state.result.value] += 1
        logger.info(
            "Game %d/%d: %s (points %d-%d)",
            index + 1,
            num_games,
            state.result.name,
            state.blue_points,
            state.red_points,
        )
    return tally
