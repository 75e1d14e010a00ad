"""
Custom exception classes for the Sampling Calculator.

The sampling engine itself never raises; these exceptions belong to the
collaborators around it (validation, preset storage, URL sharing).
"""

from __future__ import annotations


__all__ = [
    "InvalidInputError",
    "PresetError",
    "PresetNotFoundError",
    "PresetStoreError",
    "SamplingCalculatorError",
    "UrlStateError",
]


class SamplingCalculatorError(Exception):
    """
    Base exception for all Sampling Calculator errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all calculator-related errors.
    """

    pass


class InvalidInputError(SamplingCalculatorError):
    """
    Raised when a rig configuration fails validation.

    The offending fields and their messages are available in ``field_errors``.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        details = "; ".join(f"{name}: {message}" for name, message in self.field_errors.items())
        super().__init__(f"Invalid input ({details})" if details else "Invalid input")


# ============================================================================
# Preset Exceptions
# ============================================================================


class PresetError(SamplingCalculatorError):
    """Base exception for preset storage errors."""

    pass


class PresetNotFoundError(PresetError):
    """Raised when no preset matches the requested name or id."""

    pass


class PresetStoreError(PresetError):
    """Raised when the preset file cannot be written."""

    pass


# ============================================================================
# URL State Exceptions
# ============================================================================


class UrlStateError(SamplingCalculatorError):
    """Raised when a shareable URL cannot be built from the given base URL."""

    pass
