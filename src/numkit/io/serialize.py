"""Serialization for configs and generated samples."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from numkit.config.schema import NumkitConfig
from numkit.utils.exceptions import ConfigError


def compute_config_hash(config: NumkitConfig) -> str:
    """Compute a deterministic SHA-256 hash of a config.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    canonical = json.dumps(config.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(config: NumkitConfig) -> str:
    """Serialize a config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def parse_config(data: Any) -> NumkitConfig:
    """Validate already-decoded config data.

    Raises:
        ConfigError: If the data does not describe a valid config.
    """
    if data is None:
        data = {}
    try:
        return NumkitConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(json_str: str) -> NumkitConfig:
    """Deserialize a config from a JSON string."""
    try:
        data: Any = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Malformed JSON config: {exc}") from exc
    return parse_config(data)


def dump_samples_json(values: Sequence[float], seed: int | None) -> str:
    """Serialize generated samples with the seed that produced them."""
    data = {
        "count": len(values),
        "seed": seed,
        "values": list(values),
    }
    return json.dumps(data, indent=2)


def dump_samples_csv(values: Sequence[float]) -> str:
    """Export samples as a two-column CSV (Index, Value)."""
    if not values:
        return ""

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Index", "Value"])
    for i, value in enumerate(values):
        writer.writerow([i, value])
    return output.getvalue()
