"""
Property checks over complete games played with seeded random moves.

Every game runs under the default rules, move ceiling included.

Run with ``python -m unittest test_random_play.py``.
"""

import random
import unittest
from typing import Optional

from counter_air import game
from counter_air.config import GameConfig
from counter_air.core import ADVANCE_PHASE_ID, PASS_TURN_ID, GameResult, Phase
from counter_air.mechanics import OutcomeEvaluator
from counter_air.state import GameState

NUM_GAMES = 50


def play_random_game(seed: int, config: Optional[GameConfig] = None, check=None) -> GameState:
    rng = random.Random(seed)
    state = game.new_game(config)
    while not game.is_terminal(state):
        legal = game.legal_moves(state)
        if check is not None:
            check(state, legal)
        state = game.apply(state, rng.choice(legal))
    return state


class WaveLedger:
    """Forces each side starts a wave with, and the board total once combat begins."""

    def __init__(self) -> None:
        self.wave: Optional[int] = None
        self.blue_forces = 0
        self.red_forces = 0
        self.board_total: Optional[int] = None

    def observe(self, state: GameState) -> None:
        if state.current_wave == self.wave:
            return
        self.wave = state.current_wave
        self.blue_forces = state.blue_placeable_fighters + state.blue_units()
        self.red_forces = state.red_placeable_fighters + state.red_placeable_sams + state.red_units()
        self.board_total = None


class TestRandomPlay(unittest.TestCase):
    def setUp(self) -> None:
        self.ledger = WaveLedger()

    def assert_state_invariants(self, state: GameState) -> None:
        self.assertTrue(all(count >= 0 for count in state.board), state.board)
        self.assertTrue(0 <= state.blue_hits < 4)
        self.assertTrue(0 <= state.red_hits < 4)
        self.assertGreaterEqual(state.blue_placeable_fighters, 0)
        self.assertGreaterEqual(state.red_placeable_fighters, 0)
        self.assertGreaterEqual(state.red_placeable_sams, 0)
        self.assertLessEqual(state.blue_units() + state.blue_placeable_fighters, 10)
        self.assertLessEqual(state.low_strike_attacks, max(state.max_low_strike_attacks, 0))
        self.assertLessEqual(state.num_moves, state.config.max_moves)

    def assert_forces_conserved(self, state: GameState) -> None:
        ledger = self.ledger
        ledger.observe(state)
        self.assertLessEqual(state.blue_units() + state.blue_placeable_fighters, ledger.blue_forces)
        red = state.red_units() + state.red_placeable_fighters + state.red_placeable_sams
        self.assertLessEqual(red, ledger.red_forces)

        if state.current_phase >= Phase.AIR_TO_AIR:
            total = sum(state.board)
            if ledger.board_total is not None:
                self.assertLessEqual(total, ledger.board_total, state.board)
            ledger.board_total = total

    def check_legal_set(self, state: GameState, legal) -> None:
        self.assert_state_invariants(state)
        self.assert_forces_conserved(state)
        self.assertTrue(legal, "running game must offer a move")
        self.assertEqual(legal, sorted(set(legal)))
        self.assertTrue(all(0 <= move_id <= ADVANCE_PHASE_ID for move_id in legal))
        if PASS_TURN_ID in legal:
            self.assertEqual(legal, [PASS_TURN_ID])

    def test_invariants_hold_in_random_games(self) -> None:
        for seed in range(NUM_GAMES):
            with self.subTest(seed=seed):
                self.ledger = WaveLedger()
                final = play_random_game(seed, check=self.check_legal_set)
                self.assert_state_invariants(final)
                self.assertEqual(final.current_wave, 5)
                self.assertIsNotNone(final.result)

    def test_random_games_finish_within_default_ceiling(self) -> None:
        ceiling = GameConfig().max_moves
        for seed in range(NUM_GAMES, NUM_GAMES * 4):
            with self.subTest(seed=seed):
                final = play_random_game(seed)
                self.assertTrue(final.is_terminal)
                self.assertLessEqual(final.num_moves, ceiling)

    def test_result_matches_final_scores(self) -> None:
        for seed in range(NUM_GAMES):
            with self.subTest(seed=seed):
                final = play_random_game(seed)
                expected = OutcomeEvaluator.decide(
                    blue_points=final.blue_points,
                    red_points=final.red_points,
                    blue_hits=final.blue_hits,
                    red_hits=final.red_hits,
                )
                self.assertIs(final.result, expected)
                self.assertEqual(game.returns(final), expected.returns)

    def test_replay_is_deterministic(self) -> None:
        first = play_random_game(7)
        state = game.new_game()
        for move_id in first.history:
            state = game.apply(state, move_id)
        self.assertEqual(state, first)

    def test_every_legal_move_applies(self) -> None:
        rng = random.Random(99)
        state = game.new_game()
        while not game.is_terminal(state):
            legal = game.legal_moves(state)
            for move_id in legal:
                child = game.apply(state, move_id)
                self.assertTrue(all(count >= 0 for count in child.board))
            state = game.apply(state, rng.choice(legal))

    def test_always_lowest_move_finishes_within_default_ceiling(self) -> None:
        state = game.new_game()
        while not game.is_terminal(state):
            state = game.apply(state, game.legal_moves(state)[0])
        self.assertLessEqual(state.num_moves, 200)
        self.assertIn(state.result, set(GameResult))


if __name__ == "__main__":
    unittest.main()
