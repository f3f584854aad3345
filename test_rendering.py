"""
Tests for the text views and the observation encoder.

Run with ``python -m unittest test_rendering.py``.
"""

import json
import unittest

from counter_air import game
from counter_air.config import GameConfig
from counter_air.core import Zone
from counter_air.errors import InvalidPlayerError
from counter_air.rendering import (
    ObservationEncoder,
    RenderStateBuilder,
    board_diagram,
    information_state_string,
    observation_string,
    observation_tensor,
)


class TestTextViews(unittest.TestCase):
    def test_initial_diagram(self) -> None:
        lines = board_diagram(game.new_game()).split("\n")
        self.assertEqual(lines[0], "┌──┬──┬──┐")
        self.assertEqual(lines[1], "│00│  │  │")
        self.assertEqual(lines[2], "├──┤00│00│")
        self.assertEqual(lines[5], "│ 00  │00│")
        self.assertEqual(lines[7], "│00│00│00│")
        self.assertEqual(lines[8], "└──┴──┴──┘")
        self.assertTrue(lines[9].startswith("0 │0 │0 │0 │0 │0 │0 │10 │4 │4 │0"))
        self.assertTrue(lines[10].startswith("CW│CP│NM│BH│RH"))

    def test_diagram_cells_follow_board(self) -> None:
        state = game.new_game()
        for move_id in (3, 3, 2, 2, 2):
            state = game.apply(state, move_id)
        lines = board_diagram(state).split("\n")
        self.assertEqual(lines[1], "│30│  │  │")
        self.assertEqual(lines[2], "├──┤30│20│")
        self.assertEqual(lines[3], "│20│  │  │")
        self.assertEqual(lines[5], "│ 20  │20│")
        self.assertEqual(lines[7], "│40│20│20│")

    def test_observation_string_is_shared(self) -> None:
        state = game.new_game()
        self.assertEqual(observation_string(state, 0), observation_string(state, 1))
        with self.assertRaises(InvalidPlayerError):
            observation_string(state, 2)

    def test_information_state_is_history(self) -> None:
        state = game.new_game()
        self.assertEqual(information_state_string(state, 0), "")
        for move_id in (3, 3, 2):
            state = game.apply(state, move_id)
        self.assertEqual(information_state_string(state, 1), "3, 3, 2")
        with self.assertRaises(InvalidPlayerError):
            information_state_string(state, -1)


class TestObservationEncoder(unittest.TestCase):
    def setUp(self) -> None:
        self.encoder = ObservationEncoder()

    def test_layout(self) -> None:
        self.assertEqual(self.encoder.size, 265)
        self.assertEqual(len(self.encoder.segments), 38)
        offset = 0
        for segment in self.encoder.segments:
            self.assertEqual(segment.offset, offset)
            offset += segment.size
        self.assertEqual(offset, self.encoder.size)

    def test_one_hot_per_segment(self) -> None:
        state = game.new_game()
        for move_id in (3, 3, 2, 2, 2, 1):
            state = game.apply(state, move_id)
        values = self.encoder.encode(state)
        self.assertEqual(len(values), self.encoder.size)
        self.assertEqual(sum(values), len(self.encoder.segments))
        for segment in self.encoder.segments:
            window = values[segment.offset:segment.offset + segment.size]
            self.assertEqual(window.count(1.0), 1, segment.name)

        escort = self.encoder.segment("escort_attacking")
        self.assertEqual(values[escort.offset + 2], 1.0)
        target = self.encoder.segment("target")
        self.assertEqual(values[target.offset + Zone.INTERCEPT.attacking], 1.0)

    def test_out_of_range_values_clamp(self) -> None:
        state = game.new_game()
        state.blue_points = 50
        values = self.encoder.encode(state)
        points = self.encoder.segment("blue_points")
        self.assertEqual(values[points.offset + points.size - 1], 1.0)

    def test_sizes_follow_config(self) -> None:
        small = ObservationEncoder(GameConfig(blue_fighters=4))
        self.assertEqual(small.segment("escort_attacking").size, 5)
        with self.assertRaises(KeyError):
            small.segment("unknown")

    def test_observation_tensor(self) -> None:
        state = game.new_game()
        self.assertEqual(observation_tensor(state, 0), observation_tensor(state, 1))
        with self.assertRaises(InvalidPlayerError):
            observation_tensor(state, 2)


class TestRenderState(unittest.TestCase):
    def test_build_is_json_serializable(self) -> None:
        state = game.new_game()
        transition = game.apply_in_place(state, 5)
        payload = json.loads(json.dumps(RenderStateBuilder.build(state, transition)))
        self.assertEqual(payload["phase"], "PLACE_HIGH_STRIKE")
        self.assertEqual(payload["zones"]["escort"], {"attacking": 5, "evading": 0})
        self.assertEqual(payload["last_move"]["move_id"], 5)
        self.assertFalse(payload["game_over"])


if __name__ == "__main__":
    unittest.main()
