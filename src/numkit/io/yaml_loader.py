"""Config file loading for JSON and YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from numkit.config.schema import NumkitConfig
from numkit.io.serialize import load_config, parse_config
from numkit.utils.exceptions import ConfigError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict).

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid YAML.
    """
    with open(path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed YAML in {path}: {exc}") from exc


def load_config_file(path: Path) -> NumkitConfig:
    """Load a config from a ``.json``, ``.yaml`` or ``.yml`` file."""
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_config(load_yaml(path))
    return load_config(path.read_text())
