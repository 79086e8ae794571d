"""Configuration management for termfolio."""

from termfolio.config.config import (
    DEFAULTS,
    Config,
    ConfigManager,
    coerce_config_value,
    get_config_manager,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigManager",
    "coerce_config_value",
    "get_config_manager",
]
