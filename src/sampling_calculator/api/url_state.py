"""
URL State Encoding

Encodes one or two rig configurations into a compact query string for
sharing, and decodes them back. Only values that differ from the defaults
are written. Decoding never fails: anything unparseable or out of range
falls back to the default for that field. Accepted ranges are the
validation ranges, so every valid configuration survives a round trip.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qs, quote, urlsplit, urlunsplit

import deal

from .core.constants import FLOAT_TOLERANCE
from .core.exceptions import UrlStateError
from .core.utils import format_number
from .models import CalculatorInput
from .validation import (
    ValidationResult,
    validate_aperture,
    validate_barlow_factor,
    validate_binning,
    validate_focal_length,
    validate_pixel_size,
    validate_reducer_factor,
    validate_seeing,
    validate_sensor_dimension,
)


logger = logging.getLogger(__name__)


__all__ = [
    "build_shareable_url",
    "decode_state",
    "encode_state",
]


# Short parameter keys for compact URLs
KEY_FOCAL_LENGTH = "fl"
KEY_APERTURE = "ap"
KEY_REDUCER = "rd"
KEY_BARLOW = "bl"
KEY_PIXEL_SIZE = "px"
KEY_SENSOR_WIDTH = "sw"
KEY_SENSOR_HEIGHT = "sh"
KEY_BINNING = "bin"
KEY_SEEING = "see"
KEY_CAMERA = "cam"
KEY_COMPARE = "cmp"

# Setup B uses the same keys with this prefix
PREFIX_B = "b"

# Numeric fields: (input field, key, type, validator)
_NUMERIC_FIELDS: tuple[tuple[str, str, type, Callable[[Any], ValidationResult]], ...] = (
    ("base_focal_length", KEY_FOCAL_LENGTH, float, validate_focal_length),
    ("reducer_factor", KEY_REDUCER, float, validate_reducer_factor),
    ("barlow_factor", KEY_BARLOW, float, validate_barlow_factor),
    ("pixel_size", KEY_PIXEL_SIZE, float, validate_pixel_size),
    ("sensor_width_px", KEY_SENSOR_WIDTH, int, validate_sensor_dimension),
    ("sensor_height_px", KEY_SENSOR_HEIGHT, int, validate_sensor_dimension),
    ("binning", KEY_BINNING, int, validate_binning),
    ("seeing", KEY_SEEING, float, validate_seeing),
)

# Floats within the input equality tolerance of their default are left out
_ENCODE_TOLERANCE = FLOAT_TOLERANCE

# Order of keys in an encoded URL
_KEY_ORDER = (
    ("base_focal_length", KEY_FOCAL_LENGTH),
    ("aperture_diameter", KEY_APERTURE),
    ("reducer_factor", KEY_REDUCER),
    ("barlow_factor", KEY_BARLOW),
    ("pixel_size", KEY_PIXEL_SIZE),
    ("sensor_width_px", KEY_SENSOR_WIDTH),
    ("sensor_height_px", KEY_SENSOR_HEIGHT),
    ("binning", KEY_BINNING),
    ("seeing", KEY_SEEING),
)


def _encode_setup(sampling_input: CalculatorInput, prefix: str = "") -> list[str]:
    defaults = CalculatorInput()
    parameters: list[str] = []

    for name, key in _KEY_ORDER:
        value = getattr(sampling_input, name)
        default = getattr(defaults, name)

        if name == "aperture_diameter":
            if value is None and default is None:
                continue
            if value is None:
                parameters.append(f"{prefix}{key}=")
                continue
            if default is not None and abs(value - default) <= _ENCODE_TOLERANCE:
                continue
        elif isinstance(default, int):
            if value == default:
                continue
        elif abs(value - default) <= _ENCODE_TOLERANCE:
            continue

        parameters.append(f"{prefix}{key}={format_number(value)}")

    if sampling_input.camera_name:
        parameters.append(f"{prefix}{KEY_CAMERA}={quote(sampling_input.camera_name, safe='')}")

    return parameters


def encode_state(
    input_a: CalculatorInput,
    input_b: CalculatorInput | None = None,
    compare_mode: bool = False,
) -> str:
    """
    Encode calculator state as a query string.

    Args:
        input_a: Primary setup
        input_b: Second setup, written only in compare mode
        compare_mode: Whether two setups are being compared

    Returns:
        ``"?key=value&..."``, or an empty string when everything is default
    """
    parameters = _encode_setup(input_a)

    if compare_mode:
        parameters.append(f"{KEY_COMPARE}=1")
        if input_b is not None:
            parameters.extend(_encode_setup(input_b, PREFIX_B))

    return "?" + "&".join(parameters) if parameters else ""


@deal.pre(lambda value, default, kind, check: check(default).is_valid)
def _parse_number(
    value: str | None,
    default: Any,
    kind: type,
    check: Callable[[Any], ValidationResult],
) -> Any:
    if value is None or not value.strip():
        return default
    try:
        result = kind(value)
    except ValueError:
        logger.warning(f"Ignoring unparseable value '{value}'")
        return default
    if not math.isfinite(result) or not check(result).is_valid:
        logger.warning(f"Ignoring out-of-range value {value}")
        return default
    return result


def _parse_aperture(value: str | None, default: float | None) -> float | None:
    # Absent keeps the prior value; present but empty means "no aperture"
    if value is None:
        return default
    if value == "":
        return None
    return _parse_number(value, default, float, validate_aperture)


def _decode_setup(parameters: dict[str, list[str]], prefix: str = "") -> CalculatorInput:
    def first(key: str) -> str | None:
        values = parameters.get(prefix + key)
        return values[0] if values else None

    decoded = CalculatorInput()
    changes: dict[str, Any] = {
        name: _parse_number(first(key), getattr(decoded, name), kind, check)
        for name, key, kind, check in _NUMERIC_FIELDS
    }
    changes["aperture_diameter"] = _parse_aperture(first(KEY_APERTURE), decoded.aperture_diameter)
    changes["camera_name"] = first(KEY_CAMERA) or None
    return decoded.replace(**changes)


def decode_state(query_string: str | None) -> tuple[CalculatorInput, CalculatorInput, bool]:
    """
    Decode a query string into calculator state.

    Both setups start from the defaults; setup B is only read in compare mode.

    Args:
        query_string: Query string, with or without the leading "?"

    Returns:
        (setup A, setup B, compare mode)
    """
    if query_string is None or not query_string.strip():
        return CalculatorInput(), CalculatorInput(), False

    parameters = parse_qs(query_string.lstrip("?"), keep_blank_values=True)

    input_a = _decode_setup(parameters)
    compare_mode = parameters.get(KEY_COMPARE, [""])[0] == "1"
    input_b = _decode_setup(parameters, PREFIX_B) if compare_mode else CalculatorInput()

    return input_a, input_b, compare_mode


def build_shareable_url(
    base_url: str,
    input_a: CalculatorInput,
    input_b: CalculatorInput | None = None,
    compare_mode: bool = False,
) -> str:
    """
    Build a full shareable URL from a page URL and the calculator state.

    Any query or fragment on ``base_url`` is replaced.

    Raises:
        UrlStateError: If ``base_url`` is not an absolute URL
    """
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise UrlStateError(f"Not an absolute URL: '{base_url}'")
    base_path = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return base_path + encode_state(input_a, input_b, compare_mode)
