"""
Utility functions shared by the sampling engine and its collaborators.
"""

from __future__ import annotations

import math


__all__ = [
    "format_number",
    "safe_divide",
]


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide like IEEE floats do instead of raising ZeroDivisionError.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The quotient, ``±inf`` for a non-zero value over zero, ``nan`` for 0/0
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def format_number(value: float | int) -> str:
    """
    Format a number with a period decimal separator and no trailing ".0".

    Examples:
        >>> format_number(800.0)
        '800'
        >>> format_number(3.76)
        '3.76'
    """
    if isinstance(value, int):
        return str(value)
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text
