"""YAML configuration loading.

Uses ``yaml.safe_load`` so configuration files can only contain standard
YAML types. Used by
[EventInterpreter.from_yaml()][nostrefs.interpreter.service.EventInterpreter.from_yaml].

Examples:
    ```python
    from nostrefs.core.yaml import load_yaml

    config = load_yaml("config/interpreter.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary. An empty file yields ``{}``.

    Raises:
        ConfigurationError: If the file does not exist, is not valid YAML,
            or its top level is not a mapping.

    Warning:
        The structure of the returned dictionary is not validated here.
        Pass it to [InterpreterConfig][nostrefs.interpreter.configs.InterpreterConfig]
        for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
