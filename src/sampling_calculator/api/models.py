"""
Rig Configuration and Result Models

Value objects passed into and returned from the sampling engine.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from typing import Any

from .core.constants import FLOAT_TOLERANCE
from .core.enums import SamplingStatus
from .core.utils import safe_divide


__all__ = [
    "CalculatorInput",
    "CalculatorResult",
]


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= FLOAT_TOLERANCE


def _optional_close(a: float | None, b: float | None) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return _close(a, b)


@dataclass(frozen=True, slots=True, eq=False)
class CalculatorInput:
    """
    One telescope + camera + seeing configuration.

    Values are assumed to have passed validation already (see
    ``sampling_calculator.api.validation``). Instances are immutable; use
    ``replace()`` to derive a modified configuration.
    """

    # Telescope / optics
    base_focal_length: float = 800.0  # Native focal length in mm
    aperture_diameter: float | None = 200.0  # Objective diameter in mm (None if unknown)
    reducer_factor: float = 1.0  # Focal reducer multiplier
    barlow_factor: float = 1.0  # Barlow / extender multiplier

    # Camera / sensor
    pixel_size: float = 3.76  # Pixel pitch in µm
    sensor_width_px: int = 6248
    sensor_height_px: int = 4176
    binning: int = 1

    # Seeing / target
    seeing: float = 2.0  # Seeing FWHM in arcsec

    camera_name: str | None = None  # Descriptive only

    def __post_init__(self) -> None:
        # A blank label means no label
        if self.camera_name is not None and not self.camera_name.strip():
            object.__setattr__(self, "camera_name", None)

    @property
    def effective_focal_length(self) -> float:
        """
        Effective focal length in mm.

        Note: the reducer factor divides rather than multiplies, so a reducer
        below 1.0 lengthens the effective focal length. Every downstream value
        depends on this formula and it is kept as-is for compatibility.
        """
        return safe_divide(self.base_focal_length * self.barlow_factor, self.reducer_factor)

    @property
    def effective_pixel_size(self) -> float:
        """Binned pixel size in µm."""
        return self.pixel_size * self.binning

    def replace(self, **changes: Any) -> CalculatorInput:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def clone(self) -> CalculatorInput:
        """Return an equal but distinct instance."""
        return dataclasses.replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalculatorInput):
            return NotImplemented
        return (
            _close(self.base_focal_length, other.base_focal_length)
            and _optional_close(self.aperture_diameter, other.aperture_diameter)
            and _close(self.reducer_factor, other.reducer_factor)
            and _close(self.barlow_factor, other.barlow_factor)
            and _close(self.pixel_size, other.pixel_size)
            and self.sensor_width_px == other.sensor_width_px
            and self.sensor_height_px == other.sensor_height_px
            and self.binning == other.binning
            and _close(self.seeing, other.seeing)
            and self.camera_name == other.camera_name
        )

    def __hash__(self) -> int:
        # Only exactly-compared fields, so tolerant-equal inputs hash alike
        return hash(
            (
                self.sensor_width_px,
                self.sensor_height_px,
                self.binning,
                self.aperture_diameter is None,
                self.camera_name,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary of all fields."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CalculatorInput:
        """Build an input from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True, slots=True)
class CalculatorResult:
    """Everything derived from one ``CalculatorInput``."""

    pixel_scale: float  # arcsec per (binned) pixel
    fov_width_deg: float
    fov_height_deg: float
    fov_width_arcmin: float
    fov_height_arcmin: float
    effective_focal_length: float  # mm
    f_ratio: float | None
    dawes_limit_arcsec: float | None
    status: SamplingStatus
    optimal_range_min: float  # arcsec/px
    optimal_range_max: float  # arcsec/px
    status_message: str
    recommended_binning: int | None = None
    binning_recommendation: str | None = None
    recommended_corrector_factor: float | None = None
    corrector_recommendation: str | None = None
    extreme_warning: str | None = None

    @property
    def is_optimal(self) -> bool:
        """True when the pixel scale sits inside the optimal range."""
        return self.status is SamplingStatus.OPTIMAL

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary suitable for JSON output."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["status"] = self.status.value
        return data
