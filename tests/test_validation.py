"""Tests for the ray-marching validator against the brute-force counters."""

from itertools import permutations, product
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from linequeens.utils import collinear_triples, conflicts, find_collinear_triples, is_valid_solution
from linequeens.validation import validate_positions


class ValidatePositionsTests(unittest.TestCase):
    def test_known_solutions(self):
        self.assertTrue(validate_positions([0], True))
        self.assertTrue(validate_positions([1, 3, 0, 2], True))
        self.assertTrue(validate_positions([0, 4, 7, 5, 2, 6, 1, 3], False))

    def test_line_constraint_rejects_collinear_queens(self):
        # (0,0), (2,1), (4,2) share the direction (2, 1)
        positions = [0, 2, 4, 1, 3]
        self.assertTrue(validate_positions(positions, False))
        self.assertFalse(validate_positions(positions, True))

    def test_queen_between_two_others_is_caught(self):
        # (1,0), (2,2), (3,4) on one line; the middle queen is only reached
        # by rays fired from the pairs that include it.
        positions = [1, 4, 2, 0, 3]
        self.assertGreater(collinear_triples(positions), 0)
        self.assertFalse(validate_positions(positions, True))

    def test_attacks_rejected(self):
        self.assertFalse(validate_positions([0, 1, 2, 3], False))  # diagonal
        self.assertFalse(validate_positions([1, 1], False))  # column
        self.assertFalse(validate_positions([3, 1, 2, 0], False))

    def test_out_of_range_and_malformed(self):
        self.assertFalse(validate_positions([], False))
        self.assertFalse(validate_positions([0, 4, 1, 3], False))
        self.assertFalse(validate_positions([-1, 1, 3, 0], False))
        self.assertFalse(validate_positions([True], False))
        self.assertFalse(validate_positions([1.0, 3, 0, 2], False))

    def test_agrees_with_brute_force_on_every_permutation(self):
        for n in range(1, 7):
            for perm in permutations(range(n)):
                positions = list(perm)
                for line_constraint in (True, False):
                    self.assertEqual(
                        validate_positions(positions, line_constraint),
                        is_valid_solution(positions, line_constraint),
                        f"{positions}, line={line_constraint}",
                    )

    def test_agrees_with_brute_force_with_repeated_columns(self):
        for positions in product(range(4), repeat=4):
            positions = list(positions)
            for line_constraint in (True, False):
                self.assertEqual(
                    validate_positions(positions, line_constraint),
                    is_valid_solution(positions, line_constraint),
                    f"{positions}, line={line_constraint}",
                )


class BruteForceCounterTests(unittest.TestCase):
    def test_conflicts(self):
        self.assertEqual(conflicts([1, 3, 0, 2]), 0)
        self.assertEqual(conflicts([0, 1, 2, 3]), 6)
        self.assertEqual(conflicts([0, 0, 0]), 3)

    def test_collinear_triples(self):
        self.assertEqual(collinear_triples([1, 3, 0, 2]), 0)
        self.assertEqual(find_collinear_triples([0, 2, 4, 1, 3])[0], ((0, 0), (2, 1), (4, 2)))
        # every triple of a diagonal is collinear
        self.assertEqual(collinear_triples([0, 1, 2, 3]), 4)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution([1, 3, 0, 2]))
        self.assertFalse(is_valid_solution([0, 2, 4, 1, 3]))
        self.assertTrue(is_valid_solution([0, 2, 4, 1, 3], line_constraint=False))
        self.assertFalse(is_valid_solution([]))
        self.assertFalse(is_valid_solution([0, 5, 1, 3, 2]))


if __name__ == "__main__":
    unittest.main()
