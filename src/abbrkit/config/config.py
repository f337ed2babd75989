"""
Configuration management for abbrkit.

Settings come from ~/.config/abbrkit/config.json and can be overridden by
environment variables, which take precedence over the file.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

CONFIG_HOME = Path.home() / ".config" / "abbrkit"

# One snapshot per user, shared by all of that user's sessions
_UID = os.getuid() if hasattr(os, "getuid") else 0

# Default values - single source of truth
DEFAULTS = {
    "universals_source": str(CONFIG_HOME / "universal"),
    "snapshot_path": str(Path(tempfile.gettempdir()) / f"abbrkit-universals-{_UID}.json"),
    "default_bindings": True,
    "log_level": "WARNING",
    "history_file": str(CONFIG_HOME / "history"),
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "ABBR_UNIVERSALS_SOURCE": "universals_source",
    "ABBR_SNAPSHOT_PATH": "snapshot_path",
    "ABBRS_DEFAULT_BINDINGS": "default_bindings",
}


class Config(BaseModel):
    """Configuration settings for abbrkit.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    universals_source: Optional[str] = Field(
        default=None,
        description="File universal abbreviations are stored in"
    )
    snapshot_path: Optional[str] = Field(
        default=None,
        description="Snapshot file shared by running sessions"
    )
    default_bindings: Optional[bool] = Field(
        default=None,
        description="Expand on SPACE, expand and accept on ENTER"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Level for the abbr.log file"
    )
    history_file: Optional[str] = Field(
        default=None,
        description="abbr-shell command history"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)

    @property
    def source_path(self) -> Path:
        return Path(self.get("universals_source")).expanduser()

    @property
    def snapshot_file(self) -> Path:
        return Path(self.get("snapshot_path")).expanduser()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigManager:
    """Manages loading configuration."""

    CONFIG_DIR = CONFIG_HOME
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, environ: Optional[dict[str, str]] = None):
        self._config: Optional[Config] = None
        self._environ = os.environ if environ is None else environ

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file and the environment.

        Returns:
            Config object with loaded settings, or defaults if the file
            doesn't exist or is invalid.
        """
        data: dict[str, Any] = {}
        if self.CONFIG_FILE.exists():
            try:
                data = json.loads(self.CONFIG_FILE.read_text())
            except (json.JSONDecodeError, ValueError) as e:
                # Invalid config file, use defaults
                print(f"Warning: Invalid config file ({e}), using defaults")
                data = {}

        for env_name, key in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value:
                data[key] = _parse_bool(value) if key == "default_bindings" else value

        try:
            return Config.model_validate(data)
        except ValueError as e:
            print(f"Warning: Invalid config file ({e}), using defaults")
            return Config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback.

        Args:
            key: Config key to get.
            default: Default value if not set.

        Returns:
            Config value or default.
        """
        return self.config.get(key, default)


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
