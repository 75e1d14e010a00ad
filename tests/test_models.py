"""
Unit tests for the rig configuration and result models.
"""

import unittest

from sampling_calculator.api.core.enums import SamplingStatus
from sampling_calculator.api.models import CalculatorInput, CalculatorResult


class TestCalculatorInputDefaults(unittest.TestCase):
    """Test suite for CalculatorInput default values."""

    def test_defaults(self):
        """Test the documented default configuration."""
        sampling_input = CalculatorInput()
        self.assertEqual(sampling_input.base_focal_length, 800.0)
        self.assertEqual(sampling_input.aperture_diameter, 200.0)
        self.assertEqual(sampling_input.reducer_factor, 1.0)
        self.assertEqual(sampling_input.barlow_factor, 1.0)
        self.assertEqual(sampling_input.pixel_size, 3.76)
        self.assertEqual(sampling_input.sensor_width_px, 6248)
        self.assertEqual(sampling_input.sensor_height_px, 4176)
        self.assertEqual(sampling_input.binning, 1)
        self.assertEqual(sampling_input.seeing, 2.0)
        self.assertIsNone(sampling_input.camera_name)

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        sampling_input = CalculatorInput()
        with self.assertRaises(AttributeError):
            sampling_input.binning = 2  # type: ignore[misc]


class TestEffectiveValues(unittest.TestCase):
    """Test suite for derived optical values."""

    def test_effective_focal_length_no_correctors(self):
        """Test that focal length is unchanged without reducer or Barlow."""
        self.assertEqual(CalculatorInput(base_focal_length=800).effective_focal_length, 800)

    def test_effective_focal_length_barlow_and_reducer(self):
        """Test focal * barlow / reducer."""
        sampling_input = CalculatorInput(base_focal_length=800, barlow_factor=2.0, reducer_factor=0.8)
        self.assertAlmostEqual(sampling_input.effective_focal_length, 2000.0, places=9)
        self.assertEqual(sampling_input.effective_focal_length, 800 * 2.0 / 0.8)

    def test_reducer_divides_focal_length(self):
        """Test that a reducer below 1 lengthens the effective focal length."""
        sampling_input = CalculatorInput(base_focal_length=1000, reducer_factor=0.7)
        self.assertAlmostEqual(sampling_input.effective_focal_length, 1428.5714, places=3)

    def test_zero_reducer_does_not_raise(self):
        """Test that a zero reducer gives an infinite focal length."""
        sampling_input = CalculatorInput(reducer_factor=0.0)
        self.assertEqual(sampling_input.effective_focal_length, float("inf"))

    def test_effective_pixel_size(self):
        """Test that binning multiplies the pixel size."""
        self.assertAlmostEqual(CalculatorInput(pixel_size=3.76, binning=3).effective_pixel_size, 11.28)


class TestCalculatorInputEquality(unittest.TestCase):
    """Test suite for tolerant equality and hashing."""

    def test_equal_within_tolerance(self):
        """Test that float differences below 1e-6 are ignored."""
        a = CalculatorInput(base_focal_length=800.0, seeing=2.0)
        b = CalculatorInput(base_focal_length=800.0000001, seeing=2.0000004)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_not_equal_beyond_tolerance(self):
        """Test that float differences above 1e-6 count."""
        self.assertNotEqual(CalculatorInput(pixel_size=3.76), CalculatorInput(pixel_size=3.7601))

    def test_integer_fields_compared_exactly(self):
        """Test sensor size and binning comparison."""
        self.assertNotEqual(CalculatorInput(binning=1), CalculatorInput(binning=2))
        self.assertNotEqual(CalculatorInput(sensor_width_px=6248), CalculatorInput(sensor_width_px=6249))

    def test_aperture_presence_matters(self):
        """Test that an absent aperture differs from any value."""
        self.assertNotEqual(CalculatorInput(aperture_diameter=None), CalculatorInput())
        self.assertEqual(CalculatorInput(aperture_diameter=None), CalculatorInput(aperture_diameter=None))

    def test_camera_name_compared(self):
        """Test that the camera label is part of equality."""
        self.assertNotEqual(CalculatorInput(camera_name="ASI2600"), CalculatorInput())

    def test_blank_camera_name_is_none(self):
        """Test that an empty or whitespace label is the same as no label."""
        for name in ("", "   "):
            with self.subTest(name=name):
                sampling_input = CalculatorInput(camera_name=name)
                self.assertIsNone(sampling_input.camera_name)
                self.assertEqual(sampling_input, CalculatorInput())
                self.assertEqual(hash(sampling_input), hash(CalculatorInput()))

    def test_not_equal_to_other_types(self):
        """Test comparison against unrelated objects."""
        self.assertNotEqual(CalculatorInput(), "CalculatorInput()")

    def test_usable_in_sets(self):
        """Test that equal inputs collapse in a set."""
        self.assertEqual(len({CalculatorInput(), CalculatorInput(), CalculatorInput(binning=2)}), 2)


class TestCalculatorInputCopies(unittest.TestCase):
    """Test suite for replace, clone and dictionary conversion."""

    def test_replace(self):
        """Test that replace changes only the named fields."""
        original = CalculatorInput()
        changed = original.replace(binning=2, seeing=3.0)
        self.assertEqual(changed.binning, 2)
        self.assertEqual(changed.seeing, 3.0)
        self.assertEqual(changed.base_focal_length, original.base_focal_length)
        self.assertEqual(original.binning, 1)

    def test_clone_is_equal_but_distinct(self):
        """Test that clone returns an equal, separate instance."""
        original = CalculatorInput(camera_name="ASI533")
        copy = original.clone()
        self.assertEqual(copy, original)
        self.assertIsNot(copy, original)

    def test_dict_round_trip(self):
        """Test to_dict / from_dict."""
        original = CalculatorInput(base_focal_length=1200, aperture_diameter=None, camera_name="IMX571")
        self.assertEqual(CalculatorInput.from_dict(original.to_dict()), original)

    def test_from_dict_ignores_unknown_keys(self):
        """Test that extra keys are dropped."""
        sampling_input = CalculatorInput.from_dict({"binning": 2, "colour": "red"})
        self.assertEqual(sampling_input.binning, 2)


class TestCalculatorResult(unittest.TestCase):
    """Test suite for CalculatorResult."""

    def _result(self, status: SamplingStatus) -> CalculatorResult:
        return CalculatorResult(
            pixel_scale=1.0,
            fov_width_deg=1.0,
            fov_height_deg=0.5,
            fov_width_arcmin=60.0,
            fov_height_arcmin=30.0,
            effective_focal_length=800.0,
            f_ratio=None,
            dawes_limit_arcsec=None,
            status=status,
            optimal_range_min=0.67,
            optimal_range_max=1.0,
            status_message="message",
        )

    def test_is_optimal(self):
        """Test the is_optimal shortcut."""
        self.assertTrue(self._result(SamplingStatus.OPTIMAL).is_optimal)
        self.assertFalse(self._result(SamplingStatus.OVERSAMPLED).is_optimal)

    def test_recommendations_default_to_none(self):
        """Test that optional fields are absent by default."""
        result = self._result(SamplingStatus.OPTIMAL)
        self.assertIsNone(result.recommended_binning)
        self.assertIsNone(result.binning_recommendation)
        self.assertIsNone(result.recommended_corrector_factor)
        self.assertIsNone(result.corrector_recommendation)
        self.assertIsNone(result.extreme_warning)

    def test_to_dict_uses_status_value(self):
        """Test that the status is serialized as its string value."""
        data = self._result(SamplingStatus.UNDERSAMPLED).to_dict()
        self.assertEqual(data["status"], "undersampled")
        self.assertIsNone(data["f_ratio"])


if __name__ == "__main__":
    unittest.main()
