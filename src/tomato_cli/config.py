"""Configuration management for Tomato."""

from __future__ import annotations

import tomllib
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any

import tomli_w
from platformdirs import user_config_dir, user_data_dir, user_state_dir
from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from tomato_cli.models.exceptions import ConfigError, DurationParseError
from tomato_cli.utils.durations import parse_duration
from tomato_cli.utils.logger import get_logger

APP_NAME = "tomato"
CONFIG_FILE = "config.toml"

_DURATION_FIELDS = ("pomodoro_duration", "short_break_duration", "long_break_duration")
_PATH_FIELDS = ("hooks_directory", "state_file_path", "history_file_path")


def default_config_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILE


def _default_hooks_directory() -> Path:
    return Path(user_config_dir(APP_NAME)) / "hooks"


def _default_state_file() -> Path:
    return Path(user_state_dir(APP_NAME)) / "current.toml"


def _default_history_file() -> Path:
    return Path(user_data_dir(APP_NAME)) / "history.toml"


class Config(BaseModel):
    """Main configuration."""

    pomodoro_duration: timedelta = Field(default=timedelta(minutes=25))
    short_break_duration: timedelta = Field(default=timedelta(minutes=5))
    long_break_duration: timedelta = Field(default=timedelta(minutes=15))

    hooks_directory: Path = Field(default_factory=_default_hooks_directory)
    state_file_path: Path = Field(default_factory=_default_state_file)
    history_file_path: Path = Field(default_factory=_default_history_file)

    # Schedule "tomato check" through systemd-run when a timer starts
    schedule_check: bool = Field(default=False)

    @field_validator(*_DURATION_FIELDS, mode="before")
    @classmethod
    def parse_duration_string(cls, v: Any) -> Any:
        """Accept "25m" style strings as well as integer seconds."""
        if isinstance(v, str):
            try:
                return parse_duration(v)
            except DurationParseError:
                # Let pydantic try ISO 8601 ("PT25M")
                return v
        return v

    @field_validator(*_DURATION_FIELDS)
    @classmethod
    def validate_non_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("duration must not be negative")
        return v

    @field_validator(*_PATH_FIELDS)
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_serializer(*_DURATION_FIELDS)
    def serialize_duration(self, v: timedelta) -> int:
        return int(v.total_seconds())

    @field_serializer(*_PATH_FIELDS)
    def serialize_path(self, v: Path) -> str:
        return str(v)


class ConfigService:
    """Loads the TOML config file, creating it with defaults on first run."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.created = False
        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """
        Load configuration from the config file.

        Raises:
            ConfigError: If the file exists but cannot be read or validated
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, "rb") as f:
                raw = tomllib.load(f)
        except FileNotFoundError:
            # Expected on first run
            self._config = Config()
            self.save_config()
            self.created = True
            return self._config
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to parse config file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config file {self.config_path}: {e}") from e

        try:
            self._config = Config.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {self.config_path}: {e}") from e
        return self._config

    def save_config(self) -> None:
        """Write the current configuration to the config file."""
        if self._config is None:
            raise ConfigError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self._config.model_dump(), f)
        except OSError as e:
            raise ConfigError(f"Failed to save config file {self.config_path}: {e}") from e
        get_logger().info("wrote config file %s", self.config_path)

    def delete_config(self) -> bool:
        """Remove the config file. Returns True if a file was removed."""
        try:
            self.config_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise ConfigError(f"Failed to delete config file {self.config_path}: {e}") from e
        get_logger().info("deleted config file %s", self.config_path)
        return True


_config_path_override: Path | None = None


def set_config_path(path: Path | None) -> None:
    """Point get_config_service() at *path* (None for the default location)."""
    global _config_path_override
    _config_path_override = path
    get_config_service.cache_clear()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the ConfigService for this invocation."""
    return ConfigService(_config_path_override)
