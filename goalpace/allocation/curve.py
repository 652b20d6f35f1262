"""Exponential weight curve for day-by-day allocation.

The curve is an ease-in (position ** 1.5) between a minimum and a maximum
factor whose spread grows with intensity:

- intensity 1.0: 0.3 .. 1.7
- intensity 0.5: 0.65 .. 1.35
- intensity 0.0: 1.0 .. 1.0 (linear)
"""

MAX_SPREAD = 0.7
CURVE_EXPONENT = 1.5


def exponential_factor(day_index: int, total_days: int, intensity: float = 1.0) -> float:
    """Return the weight multiplier for one effective day.

    Args:
        day_index: 0-based position among effective days
        total_days: Number of effective days
        intensity: Curve intensity in [0, 1]

    Returns:
        Multiplier, e.g. 0.3 on the first day and 1.7 on the last at full intensity
    """
    if total_days <= 1:
        return 1.0

    position = day_index / (total_days - 1)
    min_factor = 1.0 - MAX_SPREAD * intensity
    max_factor = 1.0 + MAX_SPREAD * intensity
    curve = position**CURVE_EXPONENT

    return min_factor + (max_factor - min_factor) * curve
