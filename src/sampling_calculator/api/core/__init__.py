"""Core subpackage for shared constants, enums, and exceptions."""

from sampling_calculator.api.core.enums import PresetType, SamplingStatus
from sampling_calculator.api.core.exceptions import (
    InvalidInputError,
    PresetError,
    PresetNotFoundError,
    PresetStoreError,
    SamplingCalculatorError,
    UrlStateError,
)


__all__ = [
    "InvalidInputError",
    "PresetError",
    "PresetNotFoundError",
    "PresetStoreError",
    "PresetType",
    "SamplingCalculatorError",
    "SamplingStatus",
    "UrlStateError",
]
