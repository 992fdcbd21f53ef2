"""
Core functionality.

Configuration loading, record building and zone file parsing shared by the
command handlers.
"""

from .config import ConfigError, apply_overrides, config_logger, load_config
from .records import format_record_value, parse_add_args
from .zonefile import ZoneFileError, parse_zonefile, read_zonefile

__all__ = [
    "ConfigError",
    "ZoneFileError",
    "apply_overrides",
    "config_logger",
    "format_record_value",
    "load_config",
    "parse_add_args",
    "parse_zonefile",
    "read_zonefile",
]
