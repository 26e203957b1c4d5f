"""Rounding helpers with round-half-away-from-zero tie-breaking."""

from __future__ import annotations

import math

# Past 2**52 every float is already an integer, so scaling further adds nothing.
_INTEGRAL_LIMIT = 2.0**52
# Largest power of ten a float can hold.
_MAX_DECIMAL_EXPONENT = 308


def is_whole_number(x: float) -> bool:
    """True if ``x`` has no fractional part. Infinities and NaN are not whole."""
    return float(x).is_integer()


def round_half_away_from_zero(x: float) -> float:
    """Round to the nearest integer, sending .5 ties away from zero.

    Python's built-in ``round`` sends ties to the even neighbour instead.
    """
    if not math.isfinite(x):
        return x
    a = abs(x)
    whole = math.floor(a)
    # Adding 0.5 before flooring would carry 0.49999999999999994 up to 1.
    if a - whole >= 0.5:
        whole += 1
    return math.copysign(whole, x)


def round_to_nearest_10th(x: float) -> float:
    """Round ``x`` to the nearest multiple of 0.1."""
    return round_to_precision(x, 1)


def round_to_precision(x: float, precision: int) -> float:
    """Round ``x`` to ``precision`` decimal digits.

    Args:
        x: Value to round.
        precision: Number of decimal digits to keep. Negative values are
            treated as their absolute value.

    Returns:
        The rounded value. When ``precision`` exceeds what a float can
        resolve at the magnitude of ``x``, ``x`` is returned unchanged.
    """
    digits = abs(int(precision))
    if digits > _MAX_DECIMAL_EXPONENT:
        return x

    factor = 10.0**digits
    scaled = x * factor
    if not math.isfinite(scaled) or abs(scaled) >= _INTEGRAL_LIMIT:
        return x
    return round_half_away_from_zero(scaled) / factor
