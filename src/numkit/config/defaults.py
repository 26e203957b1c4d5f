"""Default configuration values for numkit."""

from __future__ import annotations

from numkit.config.schema import (
    ConversionConfig,
    NumkitConfig,
    RandomConfig,
    RoundingConfig,
)


def default_random_config() -> RandomConfig:
    """OS-seeded shared engine."""
    return RandomConfig()


def default_rounding_config() -> RoundingConfig:
    """Two decimal digits."""
    return RoundingConfig(precision=2)


def default_conversion_config() -> ConversionConfig:
    """Underflow clamps to INT_MAX, matching existing callers."""
    return ConversionConfig(underflow="max")


def default_config() -> NumkitConfig:
    """Complete default settings bundle."""
    return NumkitConfig(
        random=default_random_config(),
        rounding=default_rounding_config(),
        conversion=default_conversion_config(),
    )
