"""Configuration loading."""

import json
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from flyweight_registry.config.schemas import AppConfig
from flyweight_registry.config.utils.env_expansion import expand_env_vars
from flyweight_registry.domain.core.exceptions import ConfigurationError

CONFIG_FILE_ENV = "FLYWEIGHT_CONFIG_FILE"


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_config_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a JSON object"
        )
    return data


def load_config(
    path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> AppConfig:
    """
    Load application configuration.

    The file path defaults to the FLYWEIGHT_CONFIG_FILE environment variable;
    without a file the schema defaults apply. Overrides are merged on top of
    the file contents before environment variables are expanded.

    Args:
        path: Optional path to a JSON configuration file
        overrides: Optional nested dictionary merged over the file contents

    Returns:
        Validated application configuration

    Raises:
        ConfigurationError: If the file cannot be read or the result is invalid
    """
    path = path or os.environ.get(CONFIG_FILE_ENV)
    data: Dict[str, Any] = _read_config_file(path) if path else {}
    if overrides:
        data = _deep_merge(data, overrides)

    try:
        return AppConfig.model_validate(expand_env_vars(data))
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", fields) from e
