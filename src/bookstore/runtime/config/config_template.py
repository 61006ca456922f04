"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from bookstore.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def environment_overrides(env_mode: str, environ: Mapping[str, str]) -> dict[str, str]:
    """Return ``environ`` with ``<ENV_MODE>_``-prefixed variables applied.

    ``DEVELOPMENT_DATABASE_URL`` wins over ``DATABASE_URL`` when running in
    development mode.
    """
    prefix = f"{env_mode.upper()}_"
    resolved = dict(environ)
    for var_name, var_value in environ.items():
        if var_name.startswith(prefix):
            resolved[var_name[len(prefix):]] = var_value
            logger.debug("Using {} for {}", var_name, var_name[len(prefix):])
    return resolved


def substitute_env_vars(text: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    env = os.environ if environ is None else environ

    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return env.get(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = env.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            value = env.get(var_expr)
            if value is None:
                raise ValueError(f"Required environment variable {var_expr} not set")
            return value

    return _PLACEHOLDER.sub(replacer, text)


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Environment name used to pick prefixed overrides

    Returns:
        Parsed and validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            configuration is invalid
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    logger.info("Loading configuration for environment: {}", env_mode)
    environ = environment_overrides(env_mode, os.environ)

    substituted_content = substitute_env_vars(content, environ)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get("config", {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config
