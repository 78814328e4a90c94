import unittest

import numpy as np

from sq1_sim.pieces import Color, Corner, Edge, generate_layer
from sq1_sim.state_codec import (
    StateValidationError,
    encode_layer,
    layer_to_json,
    piece_counts,
    state_to_json,
    validate_layer,
)


class TestStateCodec(unittest.TestCase):
    def test_encode_solved_top(self):
        arr = encode_layer(generate_layer(True))
        self.assertEqual(arr.shape, (12, 3))
        self.assertEqual(arr.dtype, np.int8)
        self.assertEqual(arr[0].tolist(), [6, 4, 0])
        self.assertEqual(arr[1].tolist(), [-1, -1, -1])
        self.assertEqual(arr[2].tolist(), [4, 0, -1])

    def test_layer_to_json_drops_padding(self):
        out = layer_to_json(generate_layer(False))
        self.assertEqual(out[0], [6, 4, 1])
        self.assertEqual(out[1], [])
        self.assertEqual(out[11], [6, 1])

    def test_wrong_slot_count(self):
        with self.assertRaises(StateValidationError):
            validate_layer(generate_layer(True)[:11])

    def test_orphan_continuation(self):
        layer = generate_layer(True)
        layer[2] = None
        with self.assertRaises(StateValidationError):
            validate_layer(layer)

    def test_corner_without_continuation(self):
        layer = generate_layer(True)
        layer[1] = Edge((Color.GREEN, Color.WHITE))
        with self.assertRaises(StateValidationError):
            validate_layer(layer)

    def test_impossible_piece(self):
        layer = generate_layer(True)
        layer[2] = Edge((Color.WHITE, Color.YELLOW))
        with self.assertRaisesRegex(StateValidationError, "impossible"):
            validate_layer(layer)

    def test_unknown_slot_type(self):
        layer = generate_layer(True)
        layer[5] = "edge"
        with self.assertRaises(StateValidationError):
            encode_layer(layer)

    def test_corner_may_wrap_around(self):
        layer = generate_layer(True)
        rotated = layer[1:] + layer[:1]
        self.assertIsNone(rotated[0])
        self.assertIsInstance(rotated[11], Corner)
        self.assertEqual(validate_layer(rotated), rotated)

    def test_piece_counts_ignore_continuations(self):
        counts = piece_counts(generate_layer(True))
        self.assertEqual(sum(counts.values()), 8)

    def test_state_to_json(self):
        out = state_to_json(generate_layer(True), 3, generate_layer(False), -2, True)
        self.assertEqual(out["top_offset"], 3)
        self.assertEqual(out["bottom_offset"], -2)
        self.assertIs(out["middle"], True)
        self.assertEqual(len(out["bottom"]), 12)


if __name__ == "__main__":
    unittest.main()
