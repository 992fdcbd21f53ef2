"""
Configuration - YAML config loading and logging setup

Configuration is layered, later sources winning:

1. built-in defaults
2. global config: ``<global dir>/config.yaml`` (``~/.domains`` by default)
3. local config: ``--local-config FILE`` or ``./domains.yaml``
4. ``DOMAINS_TOKEN`` environment variable, when no token is configured
5. ``--token`` / ``--scope`` on the command line
"""

import copy
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL_DIR = "~/.domains"
CONFIG_FILE_NAME = "config.yaml"
LOCAL_CONFIG_FILE_NAME = "domains.yaml"
TOKEN_ENV_VAR = "DOMAINS_TOKEN"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(ValueError):
    """Configuration file is missing or invalid."""


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "token": None,
        "scope": None,
        "api_url": "https://api.cloud.example.com",
        "timeout": 30,
        "default_provider": "api",
        "dns_providers": {"api": {}, "mock": {}},
        "logging": {"level": "WARNING"},
    }


def _read_yaml(path: Path) -> Dict:
    """Read a YAML mapping from ``path``."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    logger.info(f"Configuration loaded from {path}")
    return data


def _merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge ``override`` into ``base``."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(
    global_config_dir: Optional[str] = None,
    local_config_path: Optional[str] = None,
    cwd: Optional[str] = None,
) -> Dict:
    """
    Load configuration from the global and local YAML files.

    Args:
        global_config_dir: Directory holding ``config.yaml``
        local_config_path: Explicit local config file; must exist if given
        cwd: Directory searched for ``domains.yaml`` when no explicit local
            config is given

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigError: If a file cannot be parsed or an explicit local config
            does not exist
    """
    config = copy.deepcopy(get_default_config())

    global_dir = Path(os.path.expanduser(global_config_dir or DEFAULT_GLOBAL_DIR))
    global_file = global_dir / CONFIG_FILE_NAME
    if global_file.is_file():
        _merge(config, _read_yaml(global_file))
    else:
        logger.info(f"Config file {global_file} not found, using defaults")

    if local_config_path:
        local_file = Path(local_config_path)
        if not local_file.is_file():
            raise ConfigError(f"Local config file {local_config_path} not found")
        _merge(config, _read_yaml(local_file))
    else:
        local_file = Path(cwd or os.getcwd()) / LOCAL_CONFIG_FILE_NAME
        if local_file.is_file():
            _merge(config, _read_yaml(local_file))

    if not config.get("token") and os.environ.get(TOKEN_ENV_VAR):
        config["token"] = os.environ[TOKEN_ENV_VAR]

    return config


def apply_overrides(config: Dict, token: Optional[str] = None, scope: Optional[str] = None) -> Dict:
    """Apply command-line overrides to a loaded configuration."""
    if token:
        config["token"] = token
    if scope:
        config["scope"] = scope
    return config


def config_logger(config: Dict, debug: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if debug else logging_config.get("level", "WARNING")

    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
