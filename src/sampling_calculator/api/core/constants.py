"""
Optical and Sampling Constants

Numeric literals used by the sampling engine and its collaborators.
"""

from typing import Final


__all__ = [
    "ARCMIN_PER_DEGREE",
    "ARCSEC_PER_DEGREE",
    "BARLOW_SUGGESTION_MAX",
    "BARLOW_SUGGESTION_MIN",
    "DAWES_CONSTANT",
    "EXTREME_PIXEL_SCALE_MAX",
    "EXTREME_PIXEL_SCALE_MIN",
    "FLOAT_TOLERANCE",
    "MAX_BINNING",
    "OPTIMAL_MAX_DIVISOR",
    "OPTIMAL_MIN_DIVISOR",
    "PIXEL_SCALE_CONSTANT",
    "REDUCER_RATIO_MAX",
    "REDUCER_RATIO_MIN",
]


# Conversion factors
ARCSEC_PER_DEGREE: Final[float] = 3600.0
"""Arcseconds per degree."""

ARCMIN_PER_DEGREE: Final[float] = 60.0
"""Arcminutes per degree."""

PIXEL_SCALE_CONSTANT: Final[float] = 206.265
"""Arcseconds per radian divided by 1000, for a µm pixel over a mm focal length."""

DAWES_CONSTANT: Final[float] = 116.0
"""Dawes' limit numerator (arcsec * mm)."""

# Sampling guideline: 2-3 pixels across the seeing FWHM
OPTIMAL_MIN_DIVISOR: Final[float] = 3.0
"""Seeing divided by this gives the smallest well-matched pixel scale."""

OPTIMAL_MAX_DIVISOR: Final[float] = 2.0
"""Seeing divided by this gives the largest well-matched pixel scale."""

# Recommendation windows
MAX_BINNING: Final[int] = 4
"""Largest on-sensor binning a recommendation may suggest."""

REDUCER_RATIO_MIN: Final[float] = 0.5
"""Strongest reducer worth suggesting (inclusive)."""

REDUCER_RATIO_MAX: Final[float] = 1.0
"""Reducer ratios must stay below this value (exclusive)."""

BARLOW_SUGGESTION_MIN: Final[float] = 1.5
"""Weakest Barlow worth suggesting (inclusive)."""

BARLOW_SUGGESTION_MAX: Final[float] = 5.0
"""Strongest Barlow worth suggesting (inclusive)."""

# Extreme pixel scale thresholds (arcsec/px)
EXTREME_PIXEL_SCALE_MAX: Final[float] = 4.0
"""Pixel scales above this are flagged as oversized."""

EXTREME_PIXEL_SCALE_MIN: Final[float] = 0.2
"""Pixel scales below this are flagged as undersized."""

FLOAT_TOLERANCE: Final[float] = 1e-6
"""Absolute tolerance for comparing floating-point input fields."""
