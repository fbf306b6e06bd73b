"""Tests for the signed vector angle."""

from __future__ import annotations

import math
import unittest

from paintgeo.geometry import InvalidPointError, Point2, vector_angle


class TestVectorAngle(unittest.TestCase):

    def test_quarter_turn_ccw(self):
        """x-axis onto y-axis is +π/2."""
        self.assertAlmostEqual(vector_angle((1, 0), (0, 0), (0, 1)), math.pi / 2)

    def test_quarter_turn_cw(self):
        self.assertAlmostEqual(vector_angle((0, 1), (0, 0), (1, 0)), -math.pi / 2)

    def test_ray_against_itself_is_zero(self):
        for a, b in [((3, 4), (0, 0)), ((-2.5, 7), (1, 1)), ((0, -9), (0, 3))]:
            self.assertEqual(vector_angle(a, b, a), 0.0)

    def test_antisymmetric(self):
        cases = [
            ((1, 0), (0, 0), (1, 1)),
            ((5, 2), (1, 1), (-3, 4)),
            ((0.3, -7.1), (2.2, 2.2), (9.5, 0.1)),
        ]
        for a, b, c in cases:
            self.assertAlmostEqual(vector_angle(a, b, c), -vector_angle(c, b, a), places=12)

    def test_shared_vertex_translation_invariant(self):
        base = vector_angle((1, 0), (0, 0), (1, 2))
        moved = vector_angle((101, -50), (100, -50), (101, -48))
        self.assertAlmostEqual(base, moved)

    def test_opposite_rays_are_plus_pi(self):
        """Straight angle is +π regardless of the sign of zero in the cross product."""
        self.assertEqual(vector_angle((1, 0), (0, 0), (-1, 0)), math.pi)
        self.assertEqual(vector_angle((-1, 0), (0, 0), (1, 0)), math.pi)

    def test_range_is_half_open(self):
        for k in range(36):
            t = 2 * math.pi * k / 36
            ang = vector_angle((1, 0), (0, 0), (math.cos(t), math.sin(t)))
            self.assertGreater(ang, -math.pi)
            self.assertLessEqual(ang, math.pi)

    def test_zero_length_ray_gives_zero(self):
        self.assertEqual(vector_angle((2, 2), (2, 2), (5, 1)), 0.0)
        self.assertEqual(vector_angle((5, 1), (2, 2), (2, 2)), 0.0)

    def test_accepts_point2_and_tuples(self):
        self.assertEqual(
            vector_angle(Point2(1, 0), Point2(0, 0), Point2(0, 1)),
            vector_angle((1, 0), [0, 0], (0.0, 1.0)),
        )

    def test_rejects_non_finite(self):
        with self.assertRaises(InvalidPointError):
            vector_angle((float("nan"), 0), (0, 0), (0, 1))
        with self.assertRaises(InvalidPointError):
            vector_angle((1, 0), (0, float("inf")), (0, 1))


class TestPoint2(unittest.TestCase):

    def test_value_semantics(self):
        self.assertEqual(Point2(1, 2), Point2(1.0, 2.0))
        self.assertEqual(hash(Point2(1, 2)), hash(Point2(1.0, 2.0)))
        self.assertEqual(len({Point2(1, 2), Point2(1.0, 2.0)}), 1)

    def test_unpacks(self):
        x, y = Point2(3, 4)
        self.assertEqual((x, y), (3.0, 4.0))

    def test_immutable(self):
        p = Point2(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 5

    def test_coordinates_are_floats(self):
        p = Point2(1, 2)
        self.assertIsInstance(p.x, float)
        self.assertIsInstance(p.y, float)

    def test_rejects_bad_input(self):
        for bad in [(float("nan"), 0), (0, float("-inf")), ("1", 2), (True, 1)]:
            with self.assertRaises(InvalidPointError):
                Point2(*bad)

    def test_of_rejects_wrong_arity(self):
        for bad in [(1,), (1, 2, 3), "12", 5, None]:
            with self.assertRaises(InvalidPointError):
                Point2.of(bad)

    def test_invalid_point_is_value_error(self):
        with self.assertRaises(ValueError):
            Point2(float("nan"), 0)

    def test_rejects_int_beyond_float_range(self):
        with self.assertRaises(InvalidPointError):
            Point2(10 ** 400, 0)
        with self.assertRaises(InvalidPointError):
            Point2.of([0, -(10 ** 400)])


if __name__ == "__main__":
    unittest.main()
