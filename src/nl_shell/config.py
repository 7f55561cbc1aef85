#!/usr/bin/env python

import copy
import os
import yaml
from typing import Dict, Any, Iterable, Optional
from pathlib import Path

from .constants import CONFIG_FILE_PATH, DEFAULT_CONFIG, MAX_CONFIG_FILE_SIZE, COMMAND_EXCEPTIONS
from .errors import ConfigError
from .logger import logger


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from YAML, merged over the built-in defaults.

    A missing default config file is not an error: nl-shell runs on defaults
    and environment variables alone. A file named explicitly must exist.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file '{config_path}' does not exist")
    else:
        config_path = CONFIG_FILE_PATH
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return config

    # Check if file is readable
    if not config_path.is_file() or not os.access(config_path, os.R_OK):
        raise ConfigError(f"Config file '{config_path}' is not readable")

    # Check file size (prevent loading massive files)
    try:
        file_size = config_path.stat().st_size
    except OSError as e:
        raise ConfigError(f"Error accessing config file '{config_path}': {e}") from e
    if file_size > MAX_CONFIG_FILE_SIZE:
        raise ConfigError(f"Config file '{config_path}' is too large (>1MB)")

    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            loaded = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading config: {e}") from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file '{config_path}' must contain a mapping at the top level")

    _merge(config, loaded)
    _validate_config(config)
    logger.debug(f"Loaded config from {config_path}")
    return config


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge *override* into *base* in place"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def _validate_config(config: Dict[str, Any]) -> None:
    """Check the shape of the sections nl-shell reads"""
    for section in ("models", "local", "settings", "theme"):
        if not isinstance(config.get(section), dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

    timeout = config["settings"].get("api_timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("settings.api_timeout must be a positive number of seconds")

    exceptions = config["settings"].get("command_exceptions")
    if exceptions is not None and not isinstance(exceptions, list):
        raise ConfigError("settings.command_exceptions must be a list of command names")


def get_command_exceptions(config: Dict[str, Any]) -> frozenset:
    """Ambiguous verb set for the classifier, from config or the default list"""
    custom: Optional[Iterable[str]] = config.get("settings", {}).get("command_exceptions")
    if custom is None:
        return COMMAND_EXCEPTIONS
    return frozenset(str(name).lower() for name in custom)
