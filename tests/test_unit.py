"""
Tests for the unit system.
"""

import math
import unittest

from geocalc.unit import Degree, Meter, Radian, Unit, UnitFloat


class TestFamilies(unittest.TestCase):
    """Test unit family assignment."""

    def test_roots(self):
        """Test each unit resolves to its family root."""
        self.assertIs(Radian.ROOT, Radian)
        self.assertIs(Degree.ROOT, Radian)
        self.assertIs(Meter.ROOT, Meter)

    def test_custom_family(self):
        """Test a new family gets its own root."""

        class Steradian(UnitFloat):
            IS_FAMILY_ROOT = True
            SYMBOL = "sr"

        self.assertIs(Steradian.ROOT, Steradian)
        with self.assertRaises(TypeError):
            Steradian(1).to(Radian)

    def test_check_same_root_rejects_plain_types(self):
        """Test non-unit types never match a family."""
        with self.assertRaises(TypeError):
            Meter._check_same_root(float)
        self.assertTrue(issubclass(Meter, Unit))


class TestConversion(unittest.TestCase):
    """Test SI storage and conversion."""

    def test_degree_stored_in_radians(self):
        """Test degrees are stored as radians."""
        self.assertAlmostEqual(float(Degree(180)), math.pi, places=12)
        self.assertAlmostEqual(Degree(180).to(Degree), 180.0, places=12)

    def test_to_radian(self):
        """Test converting between angle units."""
        self.assertAlmostEqual(Radian(math.pi).to(Degree), 180.0, places=12)
        self.assertAlmostEqual(Degree(90).to(Radian), math.pi / 2, places=12)

    def test_cross_family_conversion_fails(self):
        """Test conversion to another family raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(1).to(Degree)
        with self.assertRaises(TypeError):
            Degree(1).to(Meter)


class TestEquality(unittest.TestCase):
    """Test equality and hashing."""

    def test_same_family(self):
        """Test units of one family compare by SI value."""
        self.assertEqual(Degree(30), Radian(float(Degree(30))))
        self.assertNotEqual(Degree(1), Degree(2))

    def test_other_family_and_plain_numbers(self):
        """Test equality across families is False, plain numbers compare by SI value."""
        self.assertNotEqual(Meter(1), Radian(1))
        self.assertEqual(Meter(1), 1.0)

    def test_hashable(self):
        """Test units can be used in sets."""
        self.assertEqual(len({Meter(1), Meter(1)}), 1)


class TestDisplay(unittest.TestCase):
    """Test string representations."""

    def test_str(self):
        self.assertEqual(str(Meter(250)), "250.0 m")

    def test_repr(self):
        self.assertEqual(repr(Radian(1)), "1 rad (= 1 SI)")


if __name__ == "__main__":
    unittest.main()
