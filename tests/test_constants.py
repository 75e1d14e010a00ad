"""
Unit tests for constants module.

Tests the unit conversions and sampling thresholds used by the engine.
"""

import unittest

from sampling_calculator.api.core.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    BARLOW_SUGGESTION_MAX,
    BARLOW_SUGGESTION_MIN,
    DAWES_CONSTANT,
    EXTREME_PIXEL_SCALE_MAX,
    EXTREME_PIXEL_SCALE_MIN,
    FLOAT_TOLERANCE,
    MAX_BINNING,
    OPTIMAL_MAX_DIVISOR,
    OPTIMAL_MIN_DIVISOR,
    PIXEL_SCALE_CONSTANT,
    REDUCER_RATIO_MAX,
    REDUCER_RATIO_MIN,
)


class TestConstants(unittest.TestCase):
    """Test suite for constants module"""

    def test_angle_conversions(self):
        """Test degree, arcminute and arcsecond factors"""
        self.assertEqual(ARCSEC_PER_DEGREE, 3600.0)
        self.assertEqual(ARCMIN_PER_DEGREE, 60.0)
        self.assertIsInstance(ARCSEC_PER_DEGREE, float)

    def test_pixel_scale_constant(self):
        """Test radians-to-arcseconds factor with µm/mm units"""
        self.assertEqual(PIXEL_SCALE_CONSTANT, 206.265)

    def test_dawes_constant(self):
        """Test Dawes' limit numerator"""
        self.assertEqual(DAWES_CONSTANT, 116.0)

    def test_optimal_divisors(self):
        """Test that 2-3 pixels span the seeing disk"""
        self.assertEqual(OPTIMAL_MIN_DIVISOR, 3.0)
        self.assertEqual(OPTIMAL_MAX_DIVISOR, 2.0)

    def test_recommendation_windows(self):
        """Test reducer, Barlow and binning limits"""
        self.assertEqual((REDUCER_RATIO_MIN, REDUCER_RATIO_MAX), (0.5, 1.0))
        self.assertEqual((BARLOW_SUGGESTION_MIN, BARLOW_SUGGESTION_MAX), (1.5, 5.0))
        self.assertEqual(MAX_BINNING, 4)
        self.assertIsInstance(MAX_BINNING, int)

    def test_extreme_thresholds(self):
        """Test the very coarse and very fine pixel scale limits"""
        self.assertEqual(EXTREME_PIXEL_SCALE_MAX, 4.0)
        self.assertEqual(EXTREME_PIXEL_SCALE_MIN, 0.2)

    def test_float_tolerance(self):
        """Test equality tolerance"""
        self.assertEqual(FLOAT_TOLERANCE, 1e-6)


if __name__ == "__main__":
    unittest.main()
