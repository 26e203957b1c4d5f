"""Range membership tests over any ordered type."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar


class _Ordered(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=_Ordered)


class BoundType(Enum):
    """Whether both range endpoints belong to the range."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


def in_range(value: T, low: T, high: T, bound_type: BoundType = BoundType.INCLUSIVE) -> bool:
    """Check whether ``value`` lies between ``low`` and ``high``.

    Inclusive ranges test ``low <= value <= high``; exclusive ranges test
    ``low < value < high``. A single-point range (``low == high``) contains
    its point only when inclusive.
    """
    if bound_type is BoundType.EXCLUSIVE:
        return bool(low < value < high)
    return bool(low <= value <= high)
