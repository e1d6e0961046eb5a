"""
Number rounding and rendering shared by the formatting helpers.
"""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards positive infinity."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int = 1) -> float:
    """Round half-up to a fixed number of decimal places."""
    scale = 10**digits
    return round_half_up(value * scale) / scale


def format_number(value: Number) -> str:
    """
    Render a number without a trailing ``.0`` when it is integral.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(1.5)
        '1.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
