"""Configuration management for abbrkit."""

from abbrkit.config.config import (
    DEFAULTS,
    ENV_OVERRIDES,
    Config,
    ConfigManager,
    get_config,
    get_config_manager,
)

__all__ = [
    "DEFAULTS",
    "ENV_OVERRIDES",
    "Config",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
