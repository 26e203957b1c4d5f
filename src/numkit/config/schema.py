"""Pydantic v2 configuration models for numkit."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RandomConfig(BaseModel):
    """Seeding of the shared random engine."""

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(
        default=None, ge=0, description="Seed for the shared engine (None = OS entropy)"
    )
    per_thread: bool = Field(
        default=False, description="Give each thread its own spawned engine"
    )


class RoundingConfig(BaseModel):
    """Defaults for the rounding helpers."""

    model_config = ConfigDict(extra="forbid")

    precision: int = Field(default=2, ge=-308, le=308, description="Decimal digits to keep")


class ConversionConfig(BaseModel):
    """Float-to-int clamping behaviour."""

    model_config = ConfigDict(extra="forbid")

    underflow: Literal["max", "min"] = Field(
        default="max", description="Clamp target for values below INT_MIN"
    )


class NumkitConfig(BaseModel):
    """Bundle of all numkit settings."""

    model_config = ConfigDict(extra="forbid")

    random: RandomConfig = Field(default_factory=RandomConfig)
    rounding: RoundingConfig = Field(default_factory=RoundingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
