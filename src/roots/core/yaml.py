"""YAML configuration loading.

Safe YAML loading with ``yaml.safe_load`` so untrusted files cannot
instantiate arbitrary Python objects. Used by
[load_filters()][roots.nips.nip01.configs.load_filters] to read
subscription filters from disk.

Examples:
    ```python
    from roots.core.yaml import load_yaml

    config = load_yaml("config/filters.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file whose top level is a mapping.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. An empty file yields
        an empty dict.

    Raises:
        ConfigurationError: If the file does not exist, contains invalid
            YAML, or its top-level value is not a mapping.

    Warning:
        Only the top-level shape is checked. Pass the result to a Pydantic
        model (e.g. [FilterConfig][roots.nips.nip01.configs.FilterConfig])
        for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
