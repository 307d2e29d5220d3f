"""Tests for the interdiction grid and vector helpers."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from linequeens.board import ALL_ATTACKS, FORWARD_ATTACKS, InterdictionGrid, gcd, reduce_vector


class GcdTests(unittest.TestCase):
    def test_positive_pairs(self):
        self.assertEqual(gcd(4, 6), 2)
        self.assertEqual(gcd(6, 4), 2)
        self.assertEqual(gcd(7, 3), 1)

    def test_signs_are_ignored(self):
        self.assertEqual(gcd(-4, 6), 2)
        self.assertEqual(gcd(4, -6), 2)
        self.assertEqual(gcd(-9, -3), 3)

    def test_zero_component(self):
        self.assertEqual(gcd(0, 4), 4)
        self.assertEqual(gcd(-5, 0), 5)


class ReduceVectorTests(unittest.TestCase):
    def test_reduces_to_primitive_step(self):
        self.assertEqual(reduce_vector(4, 6), (2, 3))
        self.assertEqual(reduce_vector(3, 5), (3, 5))

    def test_keeps_direction(self):
        self.assertEqual(reduce_vector(-4, 6), (-2, 3))
        self.assertEqual(reduce_vector(4, -6), (2, -3))
        self.assertEqual(reduce_vector(-2, -2), (-1, -1))

    def test_axis_vectors(self):
        self.assertEqual(reduce_vector(0, 4), (0, 1))
        self.assertEqual(reduce_vector(0, -3), (0, -1))
        self.assertEqual(reduce_vector(5, 0), (1, 0))

    def test_zero_vector_rejected(self):
        with self.assertRaises(ValueError):
            reduce_vector(0, 0)


class InterdictionGridTests(unittest.TestCase):
    def test_new_grid_is_fully_available(self):
        grid = InterdictionGrid(5)
        self.assertEqual(grid.count_available(), 25)
        self.assertTrue(all(grid.available(x, y) for x in range(5) for y in range(5)))

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            InterdictionGrid(0)

    def test_mark_inside_and_outside(self):
        grid = InterdictionGrid(3)
        self.assertTrue(grid.mark(2, 1))
        self.assertFalse(grid.available(2, 1))
        self.assertTrue(grid.available(1, 2))

        for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
            self.assertFalse(grid.mark(x, y))
        self.assertEqual(grid.count_available(), 8)

    def test_ray_skips_start_and_stops_at_edge(self):
        grid = InterdictionGrid(4)
        grid.mark_ray(0, 0, 1, 1)
        self.assertTrue(grid.available(0, 0))
        for i in range(1, 4):
            self.assertFalse(grid.available(i, i))
        self.assertEqual(grid.count_available(), 13)

    def test_ray_with_long_step_hits_lattice_points_only(self):
        grid = InterdictionGrid(7)
        grid.mark_ray(0, 0, 2, 3)
        self.assertFalse(grid.available(2, 3))
        self.assertFalse(grid.available(4, 6))
        self.assertTrue(grid.available(1, 1))
        self.assertEqual(grid.count_available(), 47)

    def test_ray_from_edge_marks_nothing(self):
        grid = InterdictionGrid(4)
        grid.mark_ray(3, 3, 1, 0)
        self.assertEqual(grid.count_available(), 16)

    def test_zero_direction_rejected(self):
        with self.assertRaises(ValueError):
            InterdictionGrid(4).mark_ray(1, 1, 0, 0)

    def test_copy_is_independent(self):
        grid = InterdictionGrid(3)
        clone = grid.copy()
        clone.mark(1, 1)
        self.assertTrue(grid.available(1, 1))
        self.assertFalse(clone.available(1, 1))

    def test_forward_attacks_from_corner(self):
        grid = InterdictionGrid(4)
        for dx, dy in FORWARD_ATTACKS:
            grid.mark_ray(0, 0, dx, dy)
        # column 0 below plus the main diagonal
        self.assertEqual(grid.count_available(), 10)
        self.assertTrue(all(grid.available(x, 0) for x in range(4)))

    def test_all_attacks_from_center(self):
        grid = InterdictionGrid(3)
        for dx, dy in ALL_ATTACKS:
            grid.mark_ray(1, 1, dx, dy)
        self.assertEqual(grid.count_available(), 1)
        self.assertTrue(grid.available(1, 1))


if __name__ == "__main__":
    unittest.main()
