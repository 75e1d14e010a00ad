"""
Input Validation

Per-field range checks for a rig configuration. The sampling engine assumes
these checks have passed and never re-validates its input.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .core.constants import MAX_BINNING
from .core.exceptions import InvalidInputError
from .models import CalculatorInput


logger = logging.getLogger(__name__)


__all__ = [
    "ValidationResult",
    "ensure_valid",
    "validate_aperture",
    "validate_barlow_factor",
    "validate_binning",
    "validate_focal_length",
    "validate_input",
    "validate_pixel_size",
    "validate_reducer_factor",
    "validate_seeing",
    "validate_sensor_dimension",
]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one field."""

    is_valid: bool = True
    error_message: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def error(cls, message: str) -> ValidationResult:
        return cls(is_valid=False, error_message=message)


_MUST_BE_POSITIVE = "Must be greater than 0."
_MUST_BE_A_NUMBER = "Must be a number."


def validate_focal_length(value: float) -> ValidationResult:
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value <= 0:
        return ValidationResult.error(_MUST_BE_POSITIVE)
    if value > 50000:
        return ValidationResult.error("Value seems unreasonably large (max 50 000 mm).")
    return ValidationResult.valid()


def validate_aperture(value: float | None) -> ValidationResult:
    """Aperture is optional; None is valid."""
    if value is None:
        return ValidationResult.valid()
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value <= 0:
        return ValidationResult.error(_MUST_BE_POSITIVE)
    if value > 10000:
        return ValidationResult.error("Value seems unreasonably large (max 10 000 mm).")
    return ValidationResult.valid()


def validate_reducer_factor(value: float) -> ValidationResult:
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value < 0.1:
        return ValidationResult.error("Minimum is 0.1×.")
    if value > 1.0:
        return ValidationResult.error("Reducer factor must be ≤ 1.0× (use Barlow for magnification).")
    return ValidationResult.valid()


def validate_barlow_factor(value: float) -> ValidationResult:
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value < 1.0:
        return ValidationResult.error("Barlow factor must be ≥ 1.0× (use Reducer for reduction).")
    if value > 5.0:
        return ValidationResult.error("Maximum is 5.0×.")
    return ValidationResult.valid()


def validate_pixel_size(value: float) -> ValidationResult:
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value <= 0:
        return ValidationResult.error(_MUST_BE_POSITIVE)
    if value > 50:
        return ValidationResult.error("Value seems unreasonably large (max 50 µm).")
    return ValidationResult.valid()


def validate_sensor_dimension(value: int) -> ValidationResult:
    if value <= 0:
        return ValidationResult.error(_MUST_BE_POSITIVE)
    if value > 100000:
        return ValidationResult.error("Value seems unreasonably large.")
    return ValidationResult.valid()


def validate_binning(value: int) -> ValidationResult:
    if value not in range(1, MAX_BINNING + 1):
        return ValidationResult.error("Binning must be 1, 2, 3 or 4.")
    return ValidationResult.valid()


def validate_seeing(value: float) -> ValidationResult:
    if math.isnan(value):
        return ValidationResult.error(_MUST_BE_A_NUMBER)
    if value <= 0:
        return ValidationResult.error(_MUST_BE_POSITIVE)
    if value > 20:
        return ValidationResult.error("Value seems unreasonably large (max 20″).")
    return ValidationResult.valid()


def validate_input(sampling_input: CalculatorInput) -> dict[str, ValidationResult]:
    """
    Validate every numeric field of a configuration.

    Args:
        sampling_input: Configuration to check

    Returns:
        Validation result keyed by field name
    """
    return {
        "base_focal_length": validate_focal_length(sampling_input.base_focal_length),
        "aperture_diameter": validate_aperture(sampling_input.aperture_diameter),
        "reducer_factor": validate_reducer_factor(sampling_input.reducer_factor),
        "barlow_factor": validate_barlow_factor(sampling_input.barlow_factor),
        "pixel_size": validate_pixel_size(sampling_input.pixel_size),
        "sensor_width_px": validate_sensor_dimension(sampling_input.sensor_width_px),
        "sensor_height_px": validate_sensor_dimension(sampling_input.sensor_height_px),
        "binning": validate_binning(sampling_input.binning),
        "seeing": validate_seeing(sampling_input.seeing),
    }


def ensure_valid(sampling_input: CalculatorInput) -> CalculatorInput:
    """
    Check a configuration before handing it to the sampling engine.

    Args:
        sampling_input: Configuration to check

    Returns:
        The same configuration, if valid

    Raises:
        InvalidInputError: If any field is out of range
    """
    field_errors = {
        name: result.error_message or ""
        for name, result in validate_input(sampling_input).items()
        if not result.is_valid
    }
    if field_errors:
        logger.debug(f"Rejected input with {len(field_errors)} invalid field(s): {sorted(field_errors)}")
        raise InvalidInputError(field_errors)
    return sampling_input
