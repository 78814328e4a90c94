import unittest

import numpy as np

from sq1_sim.engine import SquareOneEngine
from sq1_sim.notation import format_scramble, format_twist


class TestNotation(unittest.TestCase):
    def test_pairs_joined_with_slash(self):
        self.assertEqual(format_scramble([(1, -2), (0, 3)]), "(1, -2) / (0, 3)")

    def test_single_pair_has_no_separator(self):
        self.assertEqual(format_scramble([(6, -5)]), "(6, -5)")

    def test_empty_scramble(self):
        self.assertEqual(format_scramble([]), "")

    def test_numpy_integers_render_as_plain_ints(self):
        self.assertEqual(format_twist((np.int64(4), np.int8(-1))), "(4, -1)")

    def test_full_scramble_text(self):
        twists = SquareOneEngine().scramble(seed=42)
        text = format_scramble(twists)
        self.assertEqual(text.count(" / "), len(twists) - 1)
        self.assertFalse(text.endswith(" / "))
        self.assertTrue(text.startswith(str(twists[0])))


if __name__ == "__main__":
    unittest.main()
