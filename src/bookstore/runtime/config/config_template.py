"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.bookstore.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """

    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    for var_name, var_value in list(os.environ.items()):
        if var_name.startswith(prefix):
            os.environ[var_name[len(prefix) :]] = var_value
            logger.debug("Set environment variable {} from {}", var_name[len(prefix) :], var_name)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            content does not validate
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    # Comment lines may mention placeholder syntax; only values are substituted
    content = "\n".join(
        line for line in content.splitlines() if not line.lstrip().startswith("#")
    )
    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not loaded:
        raise ValueError(f"Configuration file {file_path} is empty")

    try:
        return ConfigData(**loaded.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(file_path: Path | None = None) -> ConfigData:
    """Load configuration from ``file_path`` or ``$APP_CONFIG_FILE``.

    Falls back to model defaults when the file does not exist so that tools
    importing the package outside the project root still work.
    """
    path = file_path or Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)
