"""Shared random engine for the random-generation helpers.

One :class:`RandomEngine` is created lazily per process and handed to every
caller of :func:`get_random_engine`, so successive draws form a single
evolving sequence. Callers that want isolation can build their own engine,
or ask for a per-thread engine spawned from the shared seed sequence.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING

from numpy.random import PCG64DXSM, Generator, SeedSequence

if TYPE_CHECKING:
    from numkit.config.schema import RandomConfig

logger = logging.getLogger(__name__)

# Widest span numpy's int64 bounded draw accepts.
_MAX_BOUNDED_SPAN = 2**63 - 1


def make_rng(seed: int | SeedSequence | None = None) -> Generator:
    """Create a numpy Generator from a seed.

    Uses PCG64DXSM. A ``None`` seed pulls fresh entropy from the OS.
    """
    return Generator(PCG64DXSM(seed))


class RandomEngine:
    """A seeded bit generator with serialized access.

    Every draw happens under an internal lock, so one engine can be shared
    between threads without corrupting its state.
    """

    def __init__(self, seed: int | SeedSequence | None = None) -> None:
        self._lock = threading.Lock()
        self._seed_seq = _as_seed_sequence(seed)
        self._gen = make_rng(self._seed_seq)

    @property
    def seed(self) -> int:
        """Entropy the engine was seeded with (OS-drawn when none was given)."""
        return int(self._seed_seq.entropy)  # type: ignore[arg-type]

    def reseed(self, seed: int | None = None) -> None:
        """Reinitialize the engine in place."""
        with self._lock:
            self._seed_seq = _as_seed_sequence(seed)
            self._gen = make_rng(self._seed_seq)
        logger.debug("Reseeded random engine %#x", id(self))

    def spawn(self) -> RandomEngine:
        """Derive an independent child engine from this engine's seed sequence."""
        with self._lock:
            (child,) = self._seed_seq.spawn(1)
        return RandomEngine(child)

    def integers(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``. Requires ``low < high``.

        Bounds may be any Python ints. Draws are taken as an offset from
        ``low``; spans too wide for numpy's bounded draw are built from raw
        64-bit words with rejection.
        """
        span = high - low
        with self._lock:
            if span <= _MAX_BOUNDED_SPAN:
                return low + int(self._gen.integers(0, span))
            return low + self._wide_offset(span)

    def _wide_offset(self, span: int) -> int:
        bits = (span - 1).bit_length()
        words = -(-bits // 64)
        while True:
            value = 0
            for _ in range(words):
                value = (value << 64) | int(self._gen.bit_generator.random_raw())
            value >>= words * 64 - bits
            if value < span:
                return value

    def uniform(self, low: float, high: float) -> float:
        """Uniform real between finite ``low`` and ``high``."""
        with self._lock:
            if math.isfinite(high - low):
                return float(self._gen.uniform(low, high))
            # high - low overflows; interpolate instead of scaling the width.
            u = float(self._gen.random())
            return (1.0 - u) * low + u * high

    def raw(self) -> int:
        """One raw 64-bit output of the underlying bit generator."""
        with self._lock:
            return int(self._gen.bit_generator.random_raw())

    __call__ = raw

    def __repr__(self) -> str:
        return f"RandomEngine(seed={self.seed})"


def _as_seed_sequence(seed: int | SeedSequence | None) -> SeedSequence:
    if isinstance(seed, SeedSequence):
        return seed
    return SeedSequence(seed)


_shared_engine: RandomEngine | None = None
_shared_lock = threading.Lock()
_thread_local = threading.local()
# Bumped on every reseed so per-thread engines know to re-derive themselves.
_generation = 0


def get_random_engine(per_thread: bool = False) -> RandomEngine:
    """Return the process-wide random engine, creating it on first use.

    Args:
        per_thread: Return an engine owned by the calling thread instead.
            Each thread's engine is spawned from the shared engine's seed
            sequence, so threads no longer share one global stream.

    Returns:
        The shared engine, or the calling thread's engine.
    """
    global _shared_engine
    if _shared_engine is None:
        with _shared_lock:
            if _shared_engine is None:
                _shared_engine = RandomEngine()
                logger.debug("Created shared random engine, seed=%d", _shared_engine.seed)
    if not per_thread:
        return _shared_engine

    cached = getattr(_thread_local, "engine", None)
    if cached is not None and cached[0] == _generation:
        return cached[1]

    # Generation and spawn are read together so a concurrent reseed cannot
    # leave this thread with an engine derived from the old seed.
    with _shared_lock:
        generation = _generation
        engine = _shared_engine.spawn()
    _thread_local.engine = (generation, engine)
    logger.debug("Spawned engine for thread %s", threading.current_thread().name)
    return engine


def reseed(seed: int | None = None) -> RandomEngine:
    """Reseed the shared engine and invalidate every per-thread engine.

    Returns:
        The shared engine, same instance as before the call.
    """
    global _generation
    engine = get_random_engine()
    with _shared_lock:
        engine.reseed(seed)
        _generation += 1
    return engine


def configure_engine(config: RandomConfig) -> RandomEngine:
    """Apply a :class:`RandomConfig` and return the engine callers should use."""
    if config.seed is not None:
        reseed(config.seed)
    return get_random_engine(per_thread=config.per_thread)
