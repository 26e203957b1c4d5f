"""Tests for ranged random integers and floats."""

from __future__ import annotations

import math
from collections import Counter

import pytest

from numkit.core.generators import random_float, random_int, random_int_not_in_blacklist
from numkit.core.rng import RandomEngine
from numkit.utils.exceptions import InvalidArgumentError

SAMPLE_SIZE = 1000


class TestRandomInt:
    @pytest.mark.parametrize(("low", "high"), [(0, 10), (50, 100), (-50, -10)])
    def test_within_half_open_range(self, engine: RandomEngine, low: int, high: int) -> None:
        for _ in range(SAMPLE_SIZE):
            value = random_int(low, high, engine=engine)
            assert low <= value < high

    def test_equal_bounds_returns_low(self) -> None:
        assert random_int(5, 5) == 5

    def test_inverted_bounds_returns_low(self) -> None:
        assert random_int(10, 5) == 10

    def test_produces_variety(self, engine: RandomEngine) -> None:
        seen = {random_int(0, 100, engine=engine) for _ in range(SAMPLE_SIZE)}
        assert len(seen) > 10

    def test_reaches_both_ends(self, engine: RandomEngine) -> None:
        seen = {random_int(0, 3, engine=engine) for _ in range(SAMPLE_SIZE)}
        assert seen == {0, 1, 2}

    def test_uses_shared_engine_by_default(self) -> None:
        value = random_int(0, 10)
        assert 0 <= value < 10

    def test_returns_python_int(self, engine: RandomEngine) -> None:
        assert type(random_int(0, 10, engine=engine)) is int

    def test_bounds_beyond_int64(self, engine: RandomEngine) -> None:
        low = 2**63
        for _ in range(100):
            assert low <= random_int(low, low + 10, engine=engine) < low + 10

    def test_negative_bounds_beyond_int64(self, engine: RandomEngine) -> None:
        low = -(2**70)
        for _ in range(100):
            assert low <= random_int(low, low + 3, engine=engine) < low + 3

    def test_span_wider_than_int64(self, engine: RandomEngine) -> None:
        values = [random_int(0, 2**70, engine=engine) for _ in range(200)]
        assert all(0 <= v < 2**70 for v in values)
        assert len(set(values)) > 1
        # Uniform over 2**70, so some draws should need more than 64 bits.
        assert any(v >= 2**64 for v in values)

    def test_wide_span_reaches_every_value(self, engine: RandomEngine) -> None:
        low = -(2**64)
        high = 2**64 + 3
        values = [random_int(low, high, engine=engine) for _ in range(200)]
        assert all(low <= v < high for v in values)
        assert any(v < 0 for v in values)
        assert any(v > 0 for v in values)


class TestRandomFloat:
    def test_default_unit_interval(self, engine: RandomEngine) -> None:
        for _ in range(SAMPLE_SIZE):
            assert 0.0 <= random_float(engine=engine) <= 1.0

    @pytest.mark.parametrize(("low", "high"), [(10.0, 20.0), (-5.0, -1.0)])
    def test_within_custom_range(self, engine: RandomEngine, low: float, high: float) -> None:
        for _ in range(SAMPLE_SIZE):
            assert low <= random_float(low, high, engine=engine) <= high

    def test_mean_near_midpoint(self, engine: RandomEngine) -> None:
        values = [random_float(0.0, 100.0, engine=engine) for _ in range(SAMPLE_SIZE)]
        average = sum(values) / len(values)
        assert 30.0 < average < 70.0

    def test_equal_bounds_returns_low(self, engine: RandomEngine) -> None:
        assert random_float(2.5, 2.5, engine=engine) == 2.5

    def test_inverted_bounds_are_swapped(self, engine: RandomEngine) -> None:
        for _ in range(100):
            assert 1.0 <= random_float(5.0, 1.0, engine=engine) <= 5.0

    @pytest.mark.parametrize(
        ("low", "high"),
        [(math.nan, 1.0), (0.0, math.nan), (-math.inf, 0.0), (0.0, math.inf)],
    )
    def test_non_finite_bounds_rejected(
        self, engine: RandomEngine, low: float, high: float
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="finite"):
            random_float(low, high, engine=engine)

    def test_width_beyond_float_max(self, engine: RandomEngine) -> None:
        for _ in range(100):
            value = random_float(-1e308, 1e308, engine=engine)
            assert math.isfinite(value)
            assert -1e308 <= value <= 1e308


class TestRandomIntNotInBlacklist:
    def test_empty_blacklist(self, engine: RandomEngine) -> None:
        for _ in range(100):
            assert 0 <= random_int_not_in_blacklist([], 0, 10, engine=engine) < 10

    def test_single_blacklisted(self, engine: RandomEngine) -> None:
        for _ in range(100):
            value = random_int_not_in_blacklist([5], 0, 10, engine=engine)
            assert value != 5
            assert 0 <= value < 10

    def test_multiple_blacklisted(self, engine: RandomEngine) -> None:
        blacklist = {2, 5, 8}
        for _ in range(100):
            value = random_int_not_in_blacklist(blacklist, 0, 10, engine=engine)
            assert value not in blacklist
            assert 0 <= value < 10

    def test_produces_variety(self, engine: RandomEngine) -> None:
        seen = {random_int_not_in_blacklist([5], 0, 10, engine=engine) for _ in range(SAMPLE_SIZE)}
        assert len(seen) > 5
        assert 5 not in seen

    def test_only_one_value_left(self, engine: RandomEngine) -> None:
        blacklist = [0, 1, 2, 4]
        for _ in range(50):
            assert random_int_not_in_blacklist(blacklist, 0, 5, engine=engine) == 3

    def test_out_of_range_entries_ignored(self, engine: RandomEngine) -> None:
        for _ in range(100):
            value = random_int_not_in_blacklist([-1, 100, 3], 0, 5, engine=engine)
            assert value in {0, 1, 2, 4}

    def test_accepts_generator_input(self, engine: RandomEngine) -> None:
        value = random_int_not_in_blacklist((v for v in range(0, 10, 2)), 0, 10, engine=engine)
        assert value % 2 == 1

    def test_uniform_over_allowed_values(self) -> None:
        """Each surviving value should turn up about equally often."""
        engine = RandomEngine(2024)
        draws = 9000
        counts = Counter(
            random_int_not_in_blacklist([5], 0, 10, engine=engine) for _ in range(draws)
        )
        assert set(counts) == {0, 1, 2, 3, 4, 6, 7, 8, 9}
        expected = draws / 9
        for count in counts.values():
            assert abs(count - expected) < 0.15 * expected

    def test_deterministic_with_same_seed(self) -> None:
        e1 = RandomEngine(9)
        e2 = RandomEngine(9)
        a = [random_int_not_in_blacklist([1, 2], 0, 6, engine=e1) for _ in range(20)]
        b = [random_int_not_in_blacklist([1, 2], 0, 6, engine=e2) for _ in range(20)]
        assert a == b

    def test_raises_when_all_blacklisted(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Every value"):
            random_int_not_in_blacklist(list(range(10)), 0, 10)

    def test_raises_when_range_inverted(self) -> None:
        with pytest.raises(InvalidArgumentError, match="greater than"):
            random_int_not_in_blacklist([], 10, 5)

    def test_raises_when_blacklist_too_large(self) -> None:
        with pytest.raises(InvalidArgumentError, match="covers the whole range"):
            random_int_not_in_blacklist([*range(9), 20, 21], 0, 10)

    def test_raises_on_empty_range(self) -> None:
        with pytest.raises(InvalidArgumentError):
            random_int_not_in_blacklist([], 5, 5)

    def test_duplicates_count_toward_size_limit(self) -> None:
        """Four entries for a four-value range raise even though three values are free."""
        with pytest.raises(InvalidArgumentError, match="covers the whole range"):
            random_int_not_in_blacklist([0, 0, 0, 0], 0, 4)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            random_int_not_in_blacklist([], 3, 1)

    def test_bounds_beyond_int64(self, engine: RandomEngine) -> None:
        low = 2**64
        for _ in range(50):
            value = random_int_not_in_blacklist([low, low + 2], low, low + 4, engine=engine)
            assert value in {low + 1, low + 3}
