"""Ranged random integers and floats drawn from a :class:`RandomEngine`."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from numkit.core.rng import RandomEngine, get_random_engine
from numkit.utils.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def random_int(low: int, high: int, *, engine: RandomEngine | None = None) -> int:
    """Uniform random integer in ``[low, high)`` for any Python int bounds.

    A degenerate or inverted range (``low >= high``) returns ``low``
    instead of raising.
    """
    if low >= high:
        return low
    engine = engine or get_random_engine()
    return engine.integers(low, high)


def random_float(
    low: float = 0.0,
    high: float = 1.0,
    *,
    engine: RandomEngine | None = None,
) -> float:
    """Uniform random float between ``low`` and ``high``, unit interval by default.

    Inverted bounds are swapped; ``low == high`` returns ``low``.

    Raises:
        InvalidArgumentError: If either bound is NaN or infinite.
    """
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidArgumentError(f"Bounds must be finite, got [{low}, {high}]")
    if low == high:
        return low
    if low > high:
        low, high = high, low
    engine = engine or get_random_engine()
    return engine.uniform(low, high)


def random_int_not_in_blacklist(
    blacklist: Iterable[int],
    low: int,
    high: int,
    *,
    engine: RandomEngine | None = None,
) -> int:
    """Uniform random integer in ``[low, high)`` that is not blacklisted.

    Draws from :func:`random_int` and rejects blacklisted values until one is
    accepted. Every surviving value is equally likely.

    Args:
        blacklist: Values that must never be returned. Duplicates allowed.
        low: Inclusive lower bound.
        high: Exclusive upper bound.
        engine: Engine to draw from. Defaults to the shared engine.

    Returns:
        An integer in ``[low, high)`` not present in ``blacklist``.

    Raises:
        InvalidArgumentError: If ``low > high``, if the blacklist has at least
            as many entries as the range has values, or if every value in the
            range is blacklisted.
    """
    entries = list(blacklist)
    if low > high:
        raise InvalidArgumentError(f"Invalid range: low ({low}) is greater than high ({high})")

    span = high - low
    excluded = frozenset(entries)
    covered = sum(1 for value in excluded if low <= value < high)
    if covered >= span:
        raise InvalidArgumentError(f"Every value in [{low}, {high}) is blacklisted")
    if len(entries) >= span:
        raise InvalidArgumentError(
            f"Blacklist of {len(entries)} entries covers the whole range [{low}, {high})"
        )

    engine = engine or get_random_engine()
    rejected = 0
    while True:
        value = random_int(low, high, engine=engine)
        if value not in excluded:
            break
        rejected += 1

    if rejected:
        logger.debug("Rejected %d blacklisted draws in [%d, %d)", rejected, low, high)
    return value
