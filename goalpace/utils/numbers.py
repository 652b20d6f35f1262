"""Rounding helpers.

Rounding is half-up (2.5 -> 3) everywhere a plan or progress value is
shown, unlike Python's built-in round() which rounds half to even.
"""

import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percent_of(value: float, reference: float) -> int:
    """Return value as a rounded percentage of reference, 0 when reference is 0."""
    if reference <= 0:
        return 0
    return round_half_up(value / reference * 100)
