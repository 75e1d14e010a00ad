"""
Astrophotography Sampling Calculator

Works out how well a telescope and camera combination samples the seeing:
pixel scale, field of view, focal ratio, Dawes limit, and whether the rig is
undersampled, well matched, or oversampled, with binning and corrector advice.

Example:
    >>> from sampling_calculator import CalculatorInput, calculate
    >>> result = calculate(CalculatorInput(base_focal_length=2000, pixel_size=3.76))
    >>> round(result.pixel_scale, 2)
    0.39
    >>> result.status
    <SamplingStatus.OVERSAMPLED: 'oversampled'>
"""

# Exceptions
from sampling_calculator.api.core.exceptions import (
    InvalidInputError,
    PresetError,
    PresetNotFoundError,
    PresetStoreError,
    SamplingCalculatorError,
    UrlStateError,
)

# Enums
from sampling_calculator.api.core.enums import PresetType, SamplingStatus

# Models
from sampling_calculator.api.models import CalculatorInput, CalculatorResult

# Engine
from sampling_calculator.api.sampling import calculate


__version__ = "0.1.0"

__all__ = [
    "CalculatorInput",
    "CalculatorResult",
    "InvalidInputError",
    "PresetError",
    "PresetNotFoundError",
    "PresetStoreError",
    "PresetType",
    "SamplingCalculatorError",
    "SamplingStatus",
    "UrlStateError",
    "__version__",
    "calculate",
]
