"""
YAML configuration loader for Social Numbers.

Loads configuration from YAML files with environment variable substitution.
"""

import os
import re
from pathlib import Path
from typing import Any

import structlog
import yaml

from social_numbers.config.models import GeneratorConfig

logger = structlog.get_logger()

DEFAULT_CONFIG_PATHS = (
    Path("config/social_numbers.yaml"),
    Path("social_numbers.yaml"),
    Path.home() / ".social_numbers" / "config.yaml",
)


def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::-([^}]*))?\}"

        def replace(match: re.Match) -> str:
            var_name = match.group(1)
            default = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default)

        return re.sub(pattern, replace, value)
    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    return value


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Load a YAML file and substitute environment variables.

    Args:
        path: Path to the YAML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        yaml.YAMLError: If the YAML is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        return {}

    return _substitute_env_vars(raw_config)


def find_config_path() -> Path | None:
    """Return the first existing default configuration file, if any."""
    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            return path
    logger.debug("config_file_not_found", searched=[str(p) for p in DEFAULT_CONFIG_PATHS])
    return None


def load_config(config_path: str | Path | None = None) -> GeneratorConfig:
    """
    Load generator configuration.

    Args:
        config_path: Path to configuration YAML file. If None, the default
                    locations are searched; when none exists, defaults and
                    SOCIAL_NUMBERS_* environment variables are used.

    Returns:
        Validated GeneratorConfig object

    Raises:
        FileNotFoundError: If an explicit configuration file is not found
        ValidationError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return GeneratorConfig()

    return GeneratorConfig(**load_yaml(Path(config_path)))
