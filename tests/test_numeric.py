from decimal import Decimal
from fractions import Fraction
from unittest import TestCase

import numpy as np

from geotypes3d.numeric import (
    CoordFloat,
    CoordNum,
    from_f64,
    is_float_type,
    one,
    to_degrees,
    to_f64,
    to_radians,
    zero,
)


class TestNumeric(TestCase):
    def test_protocols(self) -> None:
        self.assertIsInstance(1, CoordNum)
        self.assertIsInstance(1.5, CoordFloat)
        self.assertIsInstance(Decimal("1.5"), CoordFloat)
        self.assertNotIsInstance("1.5", CoordNum)

    def test_identities(self) -> None:
        self.assertEqual(zero(int), 0)
        self.assertEqual(one(Fraction), Fraction(1))
        self.assertIsInstance(zero(np.float32), np.float32)

    def test_is_float_type(self) -> None:
        for dtype in [float, np.float32, np.float64, Decimal, Fraction]:
            self.assertTrue(is_float_type(dtype))
        for dtype in [int, np.int64, str, 1.0]:
            self.assertFalse(is_float_type(dtype))

    def test_to_f64(self) -> None:
        self.assertEqual(to_f64(Fraction(1, 4)), 0.25)
        self.assertEqual(to_f64(np.float32(0.5)), 0.5)
        with self.assertRaises(TypeError):
            to_f64("1.0")
        with self.assertRaises(TypeError):
            to_f64(None)

    def test_from_f64(self) -> None:
        self.assertEqual(from_f64(0.1), 0.1)
        self.assertEqual(from_f64(0.1, np.float32), np.float32(0.1))
        self.assertEqual(from_f64(0.5, Fraction), Fraction(1, 2))
        # Decimal keeps the exact binary value
        self.assertEqual(from_f64(0.1, Decimal), Decimal(0.1))
        with self.assertRaises(TypeError):
            from_f64(1.0, int)

    def test_angles(self) -> None:
        self.assertAlmostEqual(to_degrees(np.pi), 180.0)
        self.assertAlmostEqual(to_radians(180.0), np.pi)
        self.assertIsInstance(to_degrees(np.float32(1.0)), np.float32)
        with self.assertRaises(TypeError):
            to_degrees(1)
