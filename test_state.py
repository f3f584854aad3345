"""
Tests for the board ledger, rules configuration and move encoding.

Run with ``python -m unittest test_state.py``.
"""

import os
import tempfile
import unittest

from pydantic import ValidationError

from counter_air.config import DEFAULT_CONFIG, GameConfig
from counter_air.core import (
    ADVANCE_PHASE_ID,
    PASS_TURN_ID,
    Move,
    MoveType,
    Phase,
    Player,
    SubTurn,
    Zone,
    move_to_string,
    player_to_string,
    validate_player,
)
from counter_air.errors import InvalidPlayerError
from counter_air.state import Engagement, GameState


class TestZoneLayout(unittest.TestCase):
    def test_slot_pairs(self) -> None:
        self.assertEqual((Zone.ESCORT.attacking, Zone.ESCORT.evading), (0, 1))
        self.assertEqual((Zone.INTERCEPT.attacking, Zone.INTERCEPT.evading), (8, 9))
        self.assertEqual((Zone.AAA.attacking, Zone.AAA.evading), (16, 17))

    def test_of_slot(self) -> None:
        self.assertIs(Zone.of_slot(2), Zone.HIGH_STRIKE)
        self.assertIs(Zone.of_slot(15), Zone.AIRBASE)

    def test_player_opponent(self) -> None:
        self.assertIs(Player.BLUE.opponent, Player.RED)
        self.assertIs(Player.RED.opponent, Player.BLUE)


class TestGameState(unittest.TestCase):
    def test_initial_state(self) -> None:
        state = GameState.initial()
        self.assertEqual(state.board, [0] * 18)
        self.assertEqual(state.blue_placeable_fighters, 10)
        self.assertEqual(state.red_placeable_fighters, 4)
        self.assertEqual(state.red_placeable_sams, 4)
        self.assertIs(state.current_player, Player.BLUE)
        self.assertIs(state.current_phase, Phase.PLACE_ESCORT)
        self.assertEqual(state.current_wave, 0)
        self.assertIs(state.sub_turn, SubTurn.DECLARE)
        self.assertTrue(state.is_attacking)
        self.assertEqual(state.attacking_box, Zone.INTERCEPT.attacking)
        self.assertIsNone(state.result)
        self.assertFalse(state.is_terminal)

    def test_initial_pools_follow_config(self) -> None:
        config = GameConfig(blue_fighters=6, red_fighters=2, red_sams=3)
        state = GameState.initial(config)
        self.assertEqual(
            (state.blue_placeable_fighters, state.red_placeable_fighters, state.red_placeable_sams),
            (6, 2, 3),
        )
        self.assertIs(state.config, config)

    def test_flip_and_counts(self) -> None:
        state = GameState.initial()
        state.board[Zone.SEAD.attacking] = 3
        state.flip(Zone.SEAD)
        self.assertEqual(state.count(Zone.SEAD), 2)
        self.assertEqual(state.count(Zone.SEAD, evading=True), 1)
        self.assertEqual(state.total(Zone.SEAD), 3)

    def test_strike_target_prefers_attacking_slot(self) -> None:
        state = GameState.initial()
        state.board[Zone.PASSIVE_SAM.evading] = 2
        self.assertEqual(state.strike_target(Zone.PASSIVE_SAM), Zone.PASSIVE_SAM.evading)
        state.board[Zone.PASSIVE_SAM.attacking] = 1
        self.assertEqual(state.strike_target(Zone.PASSIVE_SAM), Zone.PASSIVE_SAM.attacking)

    def test_unit_totals(self) -> None:
        state = GameState.initial()
        state.board = [1] * 18
        self.assertEqual(state.blue_units(), 8)
        self.assertEqual(state.red_units(), 8)

    def test_clone_has_no_aliasing(self) -> None:
        state = GameState.initial()
        state.board[0] = 4
        state.history.append(4)

        copy = state.clone()
        copy.board[0] = 0
        copy.history.append(0)
        copy.blue_hits = 3
        copy.engagement = copy.engagement.resolve(2)

        self.assertEqual(state.board[0], 4)
        self.assertEqual(state.history, [4])
        self.assertEqual(state.blue_hits, 0)
        self.assertIs(state.sub_turn, SubTurn.DECLARE)

    def test_dict_round_trip(self) -> None:
        state = GameState.initial()
        state.board[Zone.ESCORT.attacking] = 5
        state.current_phase = Phase.AIR_TO_AIR
        state.engagement = Engagement(SubTurn.RESOLVE, Zone.HIGH_STRIKE.attacking)
        state.history = [5, 0, 5]

        restored = GameState.from_dict(state.to_dict())
        self.assertEqual(restored, state)

    def test_from_dict_accepts_legacy_flag(self) -> None:
        data = GameState.initial().to_dict()
        del data["sub_turn"]
        data["is_attacking"] = False
        data["attacking_box"] = 6
        restored = GameState.from_dict(data)
        self.assertIs(restored.sub_turn, SubTurn.RESOLVE)
        self.assertEqual(restored.attacking_box, 6)

    def test_from_dict_rejects_bad_board(self) -> None:
        data = GameState.initial().to_dict()
        data["board"] = [0] * 17
        with self.assertRaises(ValueError):
            GameState.from_dict(data)


class TestEngagement(unittest.TestCase):
    def test_transitions(self) -> None:
        engagement = Engagement()
        resolved = engagement.resolve(2)
        self.assertEqual(resolved, Engagement(SubTurn.RESOLVE, 2))
        self.assertEqual(resolved.declare(), Engagement(SubTurn.DECLARE, 2))
        self.assertEqual(resolved.retarget(6), Engagement(SubTurn.RESOLVE, 6))


class TestMoves(unittest.TestCase):
    def test_wire_ids(self) -> None:
        self.assertEqual(Move.from_id(PASS_TURN_ID).type, MoveType.PASS_TURN)
        self.assertEqual(Move.from_id(ADVANCE_PHASE_ID).type, MoveType.ADVANCE_PHASE)
        self.assertEqual(Move.from_id(7), Move.phase(7))
        for move_id in range(13):
            self.assertEqual(Move.from_id(move_id).to_id(), move_id)

    def test_meta_moves(self) -> None:
        self.assertTrue(Move.pass_turn().is_meta)
        self.assertFalse(Move.phase(0).is_meta)

    def test_invalid_ids(self) -> None:
        with self.assertRaises(ValueError):
            Move.from_id(13)
        with self.assertRaises(ValueError):
            Move.from_id(-1)
        with self.assertRaises(ValueError):
            Move(MoveType.PASS_TURN, 3)

    def test_dict_round_trip(self) -> None:
        move = Move.phase(3)
        self.assertEqual(Move.from_dict(move.to_dict()), move)

    def test_move_to_string(self) -> None:
        self.assertEqual(move_to_string(0, 5), "Blue(5)")
        self.assertEqual(move_to_string(1, 12), "Red(12)")

    def test_player_validation(self) -> None:
        self.assertIs(validate_player(1), Player.RED)
        self.assertEqual(player_to_string(0), "Blue")
        with self.assertRaises(InvalidPlayerError):
            move_to_string(2, 0)
        with self.assertRaises(InvalidPlayerError):
            validate_player(-4)


class TestGameConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(DEFAULT_CONFIG.blue_fighters, 10)
        self.assertEqual(DEFAULT_CONFIG.num_waves, 5)
        self.assertEqual(DEFAULT_CONFIG.max_moves, 200)
        self.assertEqual(DEFAULT_CONFIG.uav_waves, (0, 2))
        self.assertEqual(DEFAULT_CONFIG.kill_threshold, 4)

    def test_rejects_invalid_values(self) -> None:
        with self.assertRaises(ValidationError):
            GameConfig(blue_fighters=11)
        with self.assertRaises(ValidationError):
            GameConfig(exposed_damage=5)
        with self.assertRaises(ValidationError):
            GameConfig(num_waves=0)

    def test_frozen(self) -> None:
        with self.assertRaises(ValidationError):
            DEFAULT_CONFIG.max_moves = 10  # type: ignore[misc]

    def test_dict_round_trip(self) -> None:
        config = GameConfig(num_waves=3, uav_waves=(1,))
        self.assertEqual(GameConfig.from_dict(config.to_dict()), config)

    def test_from_env_file(self) -> None:
        keys = ("COUNTER_AIR_NUM_WAVES", "COUNTER_AIR_UAV_WAVES")
        saved = {key: os.environ.pop(key, None) for key in keys}
        try:
            with tempfile.TemporaryDirectory() as tmpdir:
                path = os.path.join(tmpdir, ".env")
                with open(path, "w", encoding="utf-8") as f:
                    f.write("COUNTER_AIR_NUM_WAVES=3\nCOUNTER_AIR_UAV_WAVES=1,2\n")
                config = GameConfig.from_env(path)
            self.assertEqual(config.num_waves, 3)
            self.assertEqual(config.uav_waves, (1, 2))
            self.assertEqual(config.max_moves, 200)
        finally:
            for key, value in saved.items():
                os.environ.pop(key, None)
                if value is not None:
                    os.environ[key] = value


if __name__ == "__main__":
    unittest.main()
