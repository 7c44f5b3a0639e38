"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import structlog
import yaml

from ..utils.errors import ConfigError
from ..utils.logging import LogEventNames
from .schema import CaptureSettings

log = structlog.get_logger()


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ConfigError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> CaptureSettings:
    """
    Load configuration from YAML file with environment variable substitution.

    Fields missing from the file fall back to environment variables and
    then to defaults.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated CaptureSettings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If environment variables are missing or the file is not a mapping
        ValidationError: If config doesn't match schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    config_dict = yaml.safe_load(substitute_env_vars(raw_yaml)) or {}
    if not isinstance(config_dict, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")

    settings = CaptureSettings(**config_dict)
    log.debug(LogEventNames.CONFIG_LOADED, path=str(path))
    return settings
