"""
Unit tests for URL state encoding and decoding.
"""

import unittest

from sampling_calculator.api.core.exceptions import UrlStateError
from sampling_calculator.api.models import CalculatorInput
from sampling_calculator.api.url_state import build_shareable_url, decode_state, encode_state


class TestEncodeState(unittest.TestCase):
    """Test suite for encode_state."""

    def test_defaults_encode_to_empty_string(self):
        """Test that an all-default input produces no query."""
        self.assertEqual(encode_state(CalculatorInput()), "")

    def test_only_changed_values_written(self):
        """Test that default values are left out."""
        query = encode_state(CalculatorInput(base_focal_length=1000, binning=2))
        self.assertEqual(query, "?fl=1000&bin=2")

    def test_decimal_values(self):
        """Test that decimals use a period and keep their precision."""
        query = encode_state(CalculatorInput(pixel_size=2.4, seeing=1.5, reducer_factor=0.63))
        self.assertEqual(query, "?rd=0.63&px=2.4&see=1.5")

    def test_absent_aperture_written_empty(self):
        """Test that a missing aperture is written as an empty value."""
        self.assertEqual(encode_state(CalculatorInput(aperture_diameter=None)), "?ap=")

    def test_camera_name_quoted(self):
        """Test that the camera label is percent-encoded."""
        self.assertEqual(encode_state(CalculatorInput(camera_name="ASI 2600&MC")), "?cam=ASI%202600%26MC")

    def test_compare_mode(self):
        """Test that compare mode writes the flag and prefixed setup B."""
        query = encode_state(
            CalculatorInput(base_focal_length=1000),
            CalculatorInput(base_focal_length=2000, binning=2),
            compare_mode=True,
        )
        self.assertEqual(query, "?fl=1000&cmp=1&bfl=2000&bbin=2")

    def test_setup_b_ignored_without_compare_mode(self):
        """Test that setup B is dropped outside compare mode."""
        query = encode_state(CalculatorInput(), CalculatorInput(base_focal_length=2000))
        self.assertEqual(query, "")


class TestDecodeState(unittest.TestCase):
    """Test suite for decode_state."""

    def test_empty_query(self):
        """Test that empty or missing queries give defaults."""
        for query in (None, "", "   ", "?"):
            with self.subTest(query=query):
                input_a, input_b, compare_mode = decode_state(query)
                self.assertEqual(input_a, CalculatorInput())
                self.assertEqual(input_b, CalculatorInput())
                self.assertFalse(compare_mode)

    def test_decode_values(self):
        """Test reading values with and without the leading question mark."""
        for query in ("?fl=1200&px=2.4&bin=2&see=3", "fl=1200&px=2.4&bin=2&see=3"):
            with self.subTest(query=query):
                input_a, _, compare_mode = decode_state(query)
                self.assertEqual(input_a, CalculatorInput(base_focal_length=1200, pixel_size=2.4, binning=2, seeing=3))
                self.assertFalse(compare_mode)

    def test_round_trip(self):
        """Test that encoding then decoding gives back an equal input."""
        original = CalculatorInput(
            base_focal_length=1371.5,
            aperture_diameter=None,
            reducer_factor=0.8,
            barlow_factor=2.0,
            pixel_size=2.9,
            sensor_width_px=3096,
            sensor_height_px=2080,
            binning=3,
            seeing=2.7,
            camera_name="ASI 462MC",
        )
        input_a, _, _ = decode_state(encode_state(original))
        self.assertEqual(input_a, original)

    def test_blank_camera_name_round_trip(self):
        """Test that an empty camera label survives a round trip."""
        original = CalculatorInput(base_focal_length=1000, camera_name="")
        self.assertEqual(encode_state(original), "?fl=1000")
        input_a, _, _ = decode_state(encode_state(original))
        self.assertEqual(input_a, original)

    def test_compare_round_trip(self):
        """Test that both setups survive a compare-mode round trip."""
        a = CalculatorInput(base_focal_length=1000)
        b = CalculatorInput(base_focal_length=2000, pixel_size=2.0, aperture_diameter=None)
        input_a, input_b, compare_mode = decode_state(encode_state(a, b, compare_mode=True))
        self.assertTrue(compare_mode)
        self.assertEqual(input_a, a)
        self.assertEqual(input_b, b)

    def test_setup_b_needs_compare_flag(self):
        """Test that prefixed keys are ignored without cmp=1."""
        _, input_b, compare_mode = decode_state("?bfl=2000")
        self.assertFalse(compare_mode)
        self.assertEqual(input_b, CalculatorInput())

    def test_invalid_values_fall_back_to_defaults(self):
        """Test that unparseable values are ignored."""
        with self.assertLogs("sampling_calculator.api.url_state", level="WARNING"):
            input_a, _, _ = decode_state("?fl=abc&bin=two&ap=wide")
        self.assertEqual(input_a, CalculatorInput())

    def test_out_of_range_values_fall_back_to_defaults(self):
        """Test that clamped-out values are ignored."""
        input_a, _, _ = decode_state("?fl=0&see=25&bin=8&ap=20000&px=500")
        self.assertEqual(input_a, CalculatorInput())

    def test_small_valid_values_survive(self):
        """Test that values near the validation minimum round-trip."""
        original = CalculatorInput(aperture_diameter=0.5, pixel_size=0.05, seeing=0.05)
        input_a, _, _ = decode_state(encode_state(original))
        self.assertEqual(input_a, original)

    def test_non_finite_values_rejected(self):
        """Test that nan and inf fall back to defaults."""
        input_a, _, _ = decode_state("?fl=nan&see=inf&ap=nan")
        self.assertEqual(input_a, CalculatorInput())

    def test_aperture_absent_versus_empty(self):
        """Test that a missing key keeps the default and an empty key clears it."""
        kept, _, _ = decode_state("?fl=1000")
        cleared, _, _ = decode_state("?fl=1000&ap=")
        self.assertEqual(kept.aperture_diameter, 200.0)
        self.assertIsNone(cleared.aperture_diameter)


class TestBuildShareableUrl(unittest.TestCase):
    """Test suite for build_shareable_url."""

    def test_appends_query(self):
        """Test that the state is appended to the page URL."""
        url = build_shareable_url("https://example.org/calc", CalculatorInput(binning=2))
        self.assertEqual(url, "https://example.org/calc?bin=2")

    def test_replaces_existing_query_and_fragment(self):
        """Test that any previous state is dropped."""
        url = build_shareable_url("https://example.org/calc?fl=5#top", CalculatorInput())
        self.assertEqual(url, "https://example.org/calc")

    def test_rejects_relative_url(self):
        """Test that a base URL without scheme and host is refused."""
        with self.assertRaises(UrlStateError):
            build_shareable_url("/calc", CalculatorInput())


if __name__ == "__main__":
    unittest.main()
