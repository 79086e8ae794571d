"""
Configuration management for termfolio.

Provides a configuration file at ~/.termfolio/config.json for default settings.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Environment variable that overrides the admin shared secret
ADMIN_PASSWORD_ENV = "TERMFOLIO_ADMIN_PASSWORD"

# Default values - single source of truth
DEFAULTS = {
    "api_base_url": "http://localhost:5000",
    "mail_relay_url": "https://formspree.io/f/mjkrzrla",
    "admin_password": "passwordissoory",
    "owner_name": "Christopher Joshy",
    "owner_title": "Full Stack Developer",
    "owner_email": "christopherjoshy4@gmail.com",
    "prompt_user": "christopher",
    "prompt_host": "portfolio",
    "admin_session_timeout": 3600.0,
    "cursor_blink_interval": 1.0,
    "request_timeout": 10.0,
    "offline": False,
    "simple": False,
    "sound": False,
    "log_level": "WARNING",
}


class Config(BaseModel):
    """Configuration settings for termfolio.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Content store settings
    api_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the portfolio REST API"
    )
    mail_relay_url: Optional[str] = Field(
        default=None,
        description="Webhook the contact form also posts to (empty to disable)"
    )
    request_timeout: Optional[float] = Field(
        default=None,
        description="HTTP timeout in seconds for store and relay calls"
    )
    offline: Optional[bool] = Field(
        default=None,
        description="Use the seeded in-memory store instead of the API"
    )

    # Admin settings
    admin_password: Optional[str] = Field(
        default=None,
        description="Shared secret for 'admin <password>'"
    )
    admin_session_timeout: Optional[float] = Field(
        default=None,
        description="Seconds before admin mode expires"
    )

    # Owner / prompt settings
    owner_name: Optional[str] = Field(default=None, description="Portfolio owner's name")
    owner_title: Optional[str] = Field(default=None, description="Portfolio owner's job title")
    owner_email: Optional[str] = Field(default=None, description="Owner's public email")
    prompt_user: Optional[str] = Field(default=None, description="User shown in the prompt")
    prompt_host: Optional[str] = Field(default=None, description="Host shown in the prompt")

    # Terminal settings
    cursor_blink_interval: Optional[float] = Field(
        default=None,
        description="Seconds between cursor blink toggles"
    )
    simple: Optional[bool] = Field(
        default=None,
        description="Use the line-mode REPL (no full-screen terminal)"
    )
    sound: Optional[bool] = Field(
        default=None,
        description="Ring the terminal bell on errors"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Console log level (DEBUG, INFO, WARNING, ERROR)"
    )
    commands_dir: Optional[str] = Field(
        default=None,
        description="Directory with extra user command packages"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Value of ``key``; env override for the secret, then the file, then DEFAULTS."""
        if key == "admin_password" and os.environ.get(ADMIN_PASSWORD_ENV):
            return os.environ[ADMIN_PASSWORD_ENV]
        value = getattr(self, key, None)
        if value is not None:
            return value
        # Unset in the file: DEFAULTS first, then the caller's default
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Reads and writes ``~/.termfolio/config.json``.

    The file holds only what the user chose to store; anything missing
    or null falls back to DEFAULTS through ``Config.get``.
    """

    CONFIG_DIR = Path.home() / ".termfolio"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """The loaded config, read from disk on first access."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def _read_file(self) -> dict[str, Any]:
        """Raw JSON object from the config file, empty if absent or unreadable."""
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            data = json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            logger.warning(f"Overwriting unreadable config file {self.CONFIG_FILE}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_file(self, data: dict[str, Any]) -> Path:
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        self.CONFIG_FILE.write_text(json.dumps(data, indent=2) + "\n")
        return self.CONFIG_FILE

    def load(self, create_if_missing: bool = True) -> Config:
        """Parse the config file.

        Args:
            create_if_missing: Write a starter file when none exists.

        Returns:
            The parsed Config; an empty Config if the file is missing,
            not JSON, or fails validation.
        """
        if not self.CONFIG_FILE.exists():
            if create_if_missing:
                self._create_default_config()
            return Config()

        try:
            return Config.model_validate(json.loads(self.CONFIG_FILE.read_text()))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Invalid config file ({e}), using defaults")
            return Config()

    def _create_default_config(self) -> None:
        """Starter file listing every default so users can see what to edit."""
        starter: dict[str, Any] = {"_comment": "termfolio configuration file"}
        # The secret is not written out; it stays at its default until set
        starter.update({key: value for key, value in DEFAULTS.items() if key != "admin_password"})
        starter["commands_dir"] = None
        self._write_file(starter)

    def save(self, config: Optional[Config] = None) -> Path:
        """Merge the non-null fields of ``config`` into the file.

        Keys already in the file (including ``_comment``) are kept.

        Returns:
            Path of the written file.
        """
        if config is not None:
            self._config = config
        current = self._config or Config()
        self._config = current

        data = self._read_file()
        data.update(current.model_dump(exclude_none=True))
        return self._write_file(data)

    def set(self, key: str, value: Any) -> None:
        """Store one value. Raises ValueError for keys Config does not define."""
        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")
        # Another invocation may have written the file since we loaded it
        self._config = self.load()
        setattr(self._config, key, value)
        self.save()

    def unset(self, key: str) -> None:
        """Null out one value so it reads from DEFAULTS again."""
        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")
        self._config = self.load()
        setattr(self._config, key, None)

        data = self._read_file()
        if key in data:
            data[key] = None
        self._write_file(data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def list_settings(self) -> dict[str, Any]:
        """Stored values that differ from DEFAULTS."""
        return {
            key: value
            for key, value in self.config.model_dump(exclude_none=True).items()
            if key not in DEFAULTS or value != DEFAULTS[key]
        }


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def coerce_config_value(key: str, value: str) -> Any:
    """Convert a ``--set-config`` string to the type of the config field.

    Raises:
        ValueError: For unknown keys or unparseable values.
    """
    if key not in Config.model_fields:
        raise ValueError(f"Unknown config key: {key}")
    default = DEFAULTS.get(key)
    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes")
    if isinstance(default, float):
        return float(value)
    if isinstance(default, int):
        return int(value)
    return value
