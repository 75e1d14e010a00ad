"""
Sampling Calculations

Turns a rig configuration into pixel scale, field of view, a sampling
classification against the seeing, and suggestions (binning, reducer or
Barlow) for moving closer to the optimal range.

Everything here is a pure function of its arguments: no I/O, no shared state,
safe to call from any number of threads. Inputs are expected to have passed
validation; zero or negative focal length, reducer or binning do not raise but
propagate ``inf``/``nan`` into the result.
"""

from __future__ import annotations

import logging
import math

import deal

from .core.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    BARLOW_SUGGESTION_MAX,
    BARLOW_SUGGESTION_MIN,
    DAWES_CONSTANT,
    EXTREME_PIXEL_SCALE_MAX,
    EXTREME_PIXEL_SCALE_MIN,
    MAX_BINNING,
    OPTIMAL_MAX_DIVISOR,
    OPTIMAL_MIN_DIVISOR,
    PIXEL_SCALE_CONSTANT,
    REDUCER_RATIO_MAX,
    REDUCER_RATIO_MIN,
)
from .core.enums import SamplingStatus
from .core.utils import safe_divide
from .models import CalculatorInput, CalculatorResult


logger = logging.getLogger(__name__)


__all__ = [
    "OVERSIZED_PIXEL_WARNING",
    "UNDERSIZED_PIXEL_WARNING",
    "calculate",
    "calculate_dawes_limit_arcsec",
    "calculate_f_ratio",
    "calculate_fov_deg",
    "calculate_pixel_scale",
    "classify_sampling",
    "extreme_pixel_scale_warning",
    "format_status_message",
    "optimal_pixel_scale_range",
    "recommend_binning",
    "recommend_corrector",
]


OVERSIZED_PIXEL_WARNING = (
    "Pixel scale is very coarse (>4″/px): stars will look blocky and fine detail will be lost."
)
UNDERSIZED_PIXEL_WARNING = (
    "Pixel scale is very fine (<0.2″/px): guiding must be extremely precise and signal is spread thin."
)


def calculate_pixel_scale(effective_pixel_size_um: float, effective_focal_length_mm: float) -> float:
    """
    Calculate image scale of one (binned) pixel.

    Formula: scale (arcsec/px) = 206.265 * pixel (µm) / focal length (mm)

    Args:
        effective_pixel_size_um: Pixel size after binning in µm
        effective_focal_length_mm: Effective focal length in mm

    Returns:
        Pixel scale in arcseconds per pixel
    """
    return safe_divide(PIXEL_SCALE_CONSTANT * effective_pixel_size_um, effective_focal_length_mm)


def calculate_fov_deg(pixel_scale: float, sensor_px: int, binning: int) -> float:
    """
    Calculate field of view along one sensor axis.

    Binning enlarges the pixel scale and shrinks the pixel count by the same
    factor, so the result does not depend on binning.

    Args:
        pixel_scale: Binned pixel scale in arcsec/px
        sensor_px: Unbinned sensor size along the axis in pixels
        binning: Binning factor

    Returns:
        Field of view in degrees
    """
    return safe_divide(pixel_scale * sensor_px, binning) / ARCSEC_PER_DEGREE


def optimal_pixel_scale_range(seeing: float) -> tuple[float, float]:
    """
    Pixel scale range that puts 2-3 pixels across the seeing disk.

    Args:
        seeing: Seeing FWHM in arcseconds

    Returns:
        (minimum, maximum) pixel scale in arcsec/px
    """
    return seeing / OPTIMAL_MIN_DIVISOR, seeing / OPTIMAL_MAX_DIVISOR


def classify_sampling(pixel_scale: float, optimal_min: float, optimal_max: float) -> SamplingStatus:
    """Classify a pixel scale; both range bounds count as optimal."""
    if pixel_scale > optimal_max:
        return SamplingStatus.UNDERSAMPLED
    if pixel_scale < optimal_min:
        return SamplingStatus.OVERSAMPLED
    return SamplingStatus.OPTIMAL


def calculate_dawes_limit_arcsec(aperture_mm: float) -> float:
    """
    Calculate Dawes' limit for optical resolution.

    Dawes' limit is the theoretical angular resolution for separating
    double stars under ideal conditions.

    Formula: Resolution (arcsec) = 116 / aperture (mm)

    Args:
        aperture_mm: Telescope aperture in millimeters

    Returns:
        Angular resolution in arcseconds
    """
    return DAWES_CONSTANT / aperture_mm


def calculate_f_ratio(effective_focal_length_mm: float, aperture_mm: float) -> float:
    """Focal ratio of the imaging train."""
    return effective_focal_length_mm / aperture_mm


def format_status_message(status: SamplingStatus, seeing: float) -> str:
    """
    Summary sentence for a classification.

    Numbers are always written with a period as decimal separator.
    """
    match status:
        case SamplingStatus.UNDERSAMPLED:
            return f"Your setup is likely undersampled for {seeing:.1f}″ seeing."
        case SamplingStatus.OVERSAMPLED:
            return f"Your setup is likely oversampled for {seeing:.1f}″ seeing."
        case _:
            return f"Your setup is well-matched for {seeing:.1f}″ seeing."


def recommend_binning(
    status: SamplingStatus,
    pixel_scale: float,
    binning: int,
    optimal_min: float,
    optimal_max: float,
) -> tuple[int | None, str | None]:
    """
    Suggest a higher binning for an oversampled setup.

    Undersampled setups never get a binning suggestion: binning only makes
    the pixel scale larger.

    Returns:
        (recommended binning, message), or (None, None)
    """
    if status is not SamplingStatus.OVERSAMPLED or binning >= MAX_BINNING:
        return None, None

    target_scale = (optimal_min + optimal_max) / 2
    unbinned_scale = safe_divide(pixel_scale, binning)
    needed = safe_divide(target_scale, unbinned_scale)
    if not math.isfinite(needed):
        logger.debug(f"Skipping binning recommendation, non-finite ratio {needed}")
        return None, None

    suggested = max(binning + 1, min(math.ceil(needed), MAX_BINNING))
    new_scale = unbinned_scale * suggested
    return suggested, f"Consider {suggested}×{suggested} binning for ~{new_scale:.2f}″/px"


def recommend_corrector(
    sampling_input: CalculatorInput,
    status: SamplingStatus,
    pixel_scale: float,
    optimal_min: float,
    optimal_max: float,
) -> tuple[float | None, str | None]:
    """
    Suggest a reducer (oversampled) or Barlow (undersampled) factor.

    Only suggestions inside the plausible windows are returned: reducer ratios
    in [0.5, 1.0) and Barlow factors in [1.5, 5.0]. Anything outside means a
    single corrector will not close the gap.

    Returns:
        (suggested factor, message), or (None, None)
    """
    target_scale = (optimal_min + optimal_max) / 2

    if status is SamplingStatus.OVERSAMPLED:
        needed_ratio = safe_divide(pixel_scale, target_scale)
        if not REDUCER_RATIO_MIN <= needed_ratio < REDUCER_RATIO_MAX:
            logger.debug(f"No reducer suggestion, needed ratio {needed_ratio:.3f} outside window")
            return None, None

        factor = round(needed_ratio, 2)
        new_scale = pixel_scale / factor
        new_focal = round(sampling_input.effective_focal_length * needed_ratio)
        return factor, (
            f"A {factor:.2f}× reducer would give ~{new_scale:.2f}″/px "
            f"(effective focal length ~{new_focal} mm)."
        )

    if status is SamplingStatus.UNDERSAMPLED:
        effective_pixel_size = sampling_input.effective_pixel_size
        new_focal = safe_divide(PIXEL_SCALE_CONSTANT * effective_pixel_size, target_scale)
        suggested = safe_divide(new_focal * sampling_input.reducer_factor, sampling_input.base_focal_length)
        if not BARLOW_SUGGESTION_MIN <= suggested <= BARLOW_SUGGESTION_MAX:
            logger.debug(f"No Barlow suggestion, needed factor {suggested:.3f} outside window")
            return None, None

        factor = round(suggested, 1)
        focal_with_barlow = safe_divide(sampling_input.base_focal_length * factor, sampling_input.reducer_factor)
        new_scale = calculate_pixel_scale(effective_pixel_size, focal_with_barlow)
        return factor, f"A {factor:.1f}× Barlow would give ~{new_scale:.2f}″/px."

    return None, None


def extreme_pixel_scale_warning(pixel_scale: float) -> str | None:
    """Warn about pixel scales that are unusable whatever the seeing."""
    if pixel_scale > EXTREME_PIXEL_SCALE_MAX:
        return OVERSIZED_PIXEL_WARNING
    if pixel_scale < EXTREME_PIXEL_SCALE_MIN:
        return UNDERSIZED_PIXEL_WARNING
    return None


@deal.post(
    lambda result: result.recommended_binning is None or result.recommended_binning <= MAX_BINNING,
    message="Recommended binning must not exceed the binning cap",
)
def calculate(sampling_input: CalculatorInput) -> CalculatorResult:
    """
    Calculate sampling metrics and recommendations for one rig.

    Args:
        sampling_input: Validated rig configuration

    Returns:
        Fully populated result; f-ratio and Dawes limit are None without an aperture
    """
    effective_focal = sampling_input.effective_focal_length
    pixel_scale = calculate_pixel_scale(sampling_input.effective_pixel_size, effective_focal)

    fov_width_deg = calculate_fov_deg(pixel_scale, sampling_input.sensor_width_px, sampling_input.binning)
    fov_height_deg = calculate_fov_deg(pixel_scale, sampling_input.sensor_height_px, sampling_input.binning)

    optimal_min, optimal_max = optimal_pixel_scale_range(sampling_input.seeing)
    status = classify_sampling(pixel_scale, optimal_min, optimal_max)
    logger.debug(
        f"Pixel scale {pixel_scale:.3f}″/px vs optimal {optimal_min:.3f}-{optimal_max:.3f}: {status.value}"
    )

    aperture = sampling_input.aperture_diameter
    f_ratio: float | None = None
    dawes: float | None = None
    if aperture is not None and aperture > 0:
        f_ratio = calculate_f_ratio(effective_focal, aperture)
        dawes = calculate_dawes_limit_arcsec(aperture)

    recommended_binning, binning_message = recommend_binning(
        status, pixel_scale, sampling_input.binning, optimal_min, optimal_max
    )
    corrector_factor, corrector_message = recommend_corrector(
        sampling_input, status, pixel_scale, optimal_min, optimal_max
    )

    return CalculatorResult(
        pixel_scale=pixel_scale,
        fov_width_deg=fov_width_deg,
        fov_height_deg=fov_height_deg,
        fov_width_arcmin=fov_width_deg * ARCMIN_PER_DEGREE,
        fov_height_arcmin=fov_height_deg * ARCMIN_PER_DEGREE,
        effective_focal_length=effective_focal,
        f_ratio=f_ratio,
        dawes_limit_arcsec=dawes,
        status=status,
        optimal_range_min=optimal_min,
        optimal_range_max=optimal_max,
        status_message=format_status_message(status, sampling_input.seeing),
        recommended_binning=recommended_binning,
        binning_recommendation=binning_message,
        recommended_corrector_factor=corrector_factor,
        corrector_recommendation=corrector_message,
        extreme_warning=extreme_pixel_scale_warning(pixel_scale),
    )
