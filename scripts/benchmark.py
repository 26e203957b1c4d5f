#!/usr/bin/env python3
"""Time the random-generation and rounding helpers.

Prints items per second for each case. Uses seed=42 so the random cases
draw the same sequence on every run.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from numkit import (
    RandomEngine,
    is_whole_number,
    random_float,
    random_int,
    random_int_not_in_blacklist,
    round_to_nearest_10th,
    round_to_precision,
)

ITERATIONS = 100_000


def bench(name: str, fn: Callable[[], object], iterations: int = ITERATIONS) -> float:
    """Run ``fn`` ``iterations`` times and report items per second."""
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - start
    rate = iterations / elapsed if elapsed > 0 else float("inf")
    print(f"  {name:<40} {rate:>14,.0f} items/s")
    return rate


def bench_random(engine: RandomEngine) -> None:
    print("Random generation:")
    bench("random_int small range", lambda: random_int(0, 10, engine=engine))
    bench("random_int medium range", lambda: random_int(0, 1000, engine=engine))
    bench("random_int large range", lambda: random_int(0, 1_000_000, engine=engine))
    bench("random_float default range", lambda: random_float(engine=engine))
    bench("random_float custom range", lambda: random_float(-100.0, 100.0, engine=engine))

    small = [1, 3, 5]
    half = list(range(0, 100, 2))
    bench(
        "blacklist small",
        lambda: random_int_not_in_blacklist(small, 0, 10, engine=engine),
    )
    # Half the range excluded, so about two draws per accepted value.
    bench(
        "blacklist half of range",
        lambda: random_int_not_in_blacklist(half, 0, 100, engine=engine),
        iterations=ITERATIONS // 10,
    )


def bench_rounding() -> None:
    print("Rounding:")
    bench("is_whole_number", lambda: is_whole_number(3.14159))
    bench("round_to_nearest_10th", lambda: round_to_nearest_10th(3.14159))
    bench("round_to_precision(2)", lambda: round_to_precision(3.14159, 2))
    bench("round_to_precision(6)", lambda: round_to_precision(3.14159265, 6))


if __name__ == "__main__":
    print(f"Benchmarking with {ITERATIONS:,} iterations per case...")
    bench_random(RandomEngine(42))
    bench_rounding()
    print("Done.")
