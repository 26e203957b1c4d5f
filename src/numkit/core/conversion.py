"""Float to 32-bit integer conversion with clamping."""

from __future__ import annotations

import logging
import math
from typing import Literal

logger = logging.getLogger(__name__)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def float_to_int(x: float, underflow: Literal["max", "min"] = "max") -> int:
    """Truncate ``x`` toward zero and clamp it to the 32-bit signed range.

    Values above ``INT_MAX`` return ``INT_MAX``. Values below ``INT_MIN``
    also return ``INT_MAX`` unless ``underflow="min"`` is passed, in which
    case they return ``INT_MIN``. Existing callers depend on the
    max-on-underflow result, so it stays the default. NaN returns
    ``INT_MAX``.

    Args:
        x: Value to convert.
        underflow: Clamp target for values below ``INT_MIN``.

    Returns:
        The truncated, clamped integer.
    """
    if math.isnan(x):
        logger.warning("Cannot convert NaN to int, returning %d", INT_MAX)
        return INT_MAX
    if x > INT_MAX:
        logger.warning("%r overflows int, clamping to %d", x, INT_MAX)
        return INT_MAX
    if x < INT_MIN:
        target = INT_MIN if underflow == "min" else INT_MAX
        logger.warning("%r underflows int, clamping to %d", x, target)
        return target
    return math.trunc(x)
