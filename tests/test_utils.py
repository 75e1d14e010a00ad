"""
Unit tests for core utility functions.
"""

import math
import unittest

from sampling_calculator.api.core.utils import format_number, safe_divide


class TestSafeDivide(unittest.TestCase):
    """Test suite for safe_divide"""

    def test_ordinary_division(self):
        """Test non-zero divisors"""
        self.assertEqual(safe_divide(10.0, 4.0), 2.5)

    def test_division_by_zero(self):
        """Test signed infinities"""
        self.assertEqual(safe_divide(1.0, 0.0), math.inf)
        self.assertEqual(safe_divide(-1.0, 0.0), -math.inf)
        self.assertEqual(safe_divide(1.0, -0.0), -math.inf)

    def test_zero_over_zero(self):
        """Test that 0/0 is nan"""
        self.assertTrue(math.isnan(safe_divide(0.0, 0.0)))
        self.assertTrue(math.isnan(safe_divide(math.nan, 0.0)))


class TestFormatNumber(unittest.TestCase):
    """Test suite for format_number"""

    def test_whole_floats(self):
        """Test that trailing .0 is dropped"""
        self.assertEqual(format_number(800.0), "800")

    def test_decimals(self):
        """Test that decimals keep a period separator"""
        self.assertEqual(format_number(3.76), "3.76")
        self.assertEqual(format_number(0.63), "0.63")

    def test_integers(self):
        """Test integer formatting"""
        self.assertEqual(format_number(6248), "6248")


if __name__ == "__main__":
    unittest.main()
