"""Loading of config.yaml with environment variable substitution."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.bookshelf.runtime.config.config_data import ConfigData

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
        expr = match.group(1)

        if ":-" in expr:
            name, default = expr.split(":-", 1)
            return os.getenv(name, default)

        if ":?" in expr:
            name, message = expr.split(":?", 1)
            value = os.getenv(name)
            if value is None:
                raise ValueError(f"Required environment variable {name}: {message}")
            return value

        value = os.getenv(expr)
        if value is None:
            raise ValueError(f"Required environment variable {expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    overrides = [name for name in os.environ if name.startswith(prefix)]
    if overrides:
        logger.info("Applying {} overrides: {}", env_mode, overrides)
    for name in overrides:
        os.environ[name[len(prefix) :]] = os.environ[name]


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML configuration file with environment variable substitution.

    A missing file yields the default configuration.

    Raises:
        ValueError: If the YAML is malformed, a required environment variable
            is missing, or the values fail validation.
    """
    if not file_path.exists():
        logger.debug("No configuration file at {}; using defaults", file_path)
        return ConfigData()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.debug("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    content = substitute_env_vars(file_path.read_text())

    try:
        loaded = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not isinstance(loaded, dict):
        raise ValueError("Configuration file must contain a mapping")

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
