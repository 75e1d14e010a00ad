"""
Common Enums

Enumerations used throughout the Sampling Calculator API.
"""

from enum import StrEnum


__all__ = [
    "PresetType",
    "SamplingStatus",
]


class SamplingStatus(StrEnum):
    """How well the pixel scale matches the seeing disk."""

    UNDERSAMPLED = "undersampled"  # Pixels too large for the seeing
    OPTIMAL = "optimal"  # 2-3 pixels across the seeing FWHM
    OVERSAMPLED = "oversampled"  # Pixels too small for the seeing

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.capitalize()


class PresetType(StrEnum):
    """Kinds of saved presets."""

    TELESCOPE = "telescope"  # Focal length, aperture, reducer, barlow
    CAMERA = "camera"  # Pixel size, sensor size, binning
    FULL_RIG = "full_rig"  # Everything, including seeing
