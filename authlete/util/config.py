"""
Configuration utilities for the Authlete SDK.
Provides loading of settings from environment variables and files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..types.errors import ConfigurationError

ENV_PREFIX = "AUTHLETE_"


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        else:
            return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = ENV_PREFIX) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = ENV_PREFIX) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise ConfigurationError(
            f"Configuration file not found: {file_path}", config_key='file',
            config_value=file_path)

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            if file_ext in ['.json']:
                data = json.load(f)
            elif file_ext in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {file_ext}",
                    config_key='file', config_value=file_path)
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse '{file_path}': {e}", config_key='file',
                config_value=file_path, cause=e)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file '{file_path}' must contain a mapping.",
            config_key='file', config_value=file_path)

    return data


def flatten_config(config: Dict[str, Any], separator: str = '.') -> Dict[str, Any]:
    """
    Flatten nested sections into dotted keys, so that
    ``{'service': {'api_key': 'x'}}`` becomes ``{'service.api_key': 'x'}``.
    """
    result = {}

    def walk(prefix: str, value: Any) -> None:
        if isinstance(value, dict):
            for key, child in value.items():
                walk(f"{prefix}{separator}{key}" if prefix else str(key), child)
        else:
            result[prefix] = value

    walk('', config)
    return result
