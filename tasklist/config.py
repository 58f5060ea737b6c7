"""
Configuration management for tasklist.

Uses pydantic-settings for environment variable support and YAML config loading.
Configuration hierarchy (later overrides earlier):
1. Default values in Settings class
2. YAML config file (~/.config/tasklist/config.yaml, or TASKLIST_CONFIG)
3. Environment variables (prefixed with TASKLIST_)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tasklist.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TASKLIST_CONFIG"


def default_config_path() -> Path | None:
    """Get the YAML config path, or None if no home directory is available."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / ".config" / "tasklist" / "config.yaml"
    except (RuntimeError, KeyError):
        return None


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are prefixed with TASKLIST_ and override config file values.
    Example: TASKLIST_HOME_DIR=/tmp/todo stores tasks in /tmp/todo/TODO
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        extra="ignore",
    )

    home_dir: Path | None = None
    file_name: str = "TODO"
    log_level: str = "WARNING"
    log_file: Path | None = None
    strict: bool = True
    no_color: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """Task file must be a plain name inside the home directory."""
        if not v or Path(v).name != v:
            raise ValueError(f"Invalid file name: {v!r}")
        return v

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> Settings:
        """
        Load settings from YAML config file with environment variable overrides.

        Args:
            config_path: Path to YAML config file. Defaults to default_config_path()

        Returns:
            Settings instance with merged configuration

        Raises:
            ConfigurationError: If the file cannot be parsed or holds invalid values
        """
        if config_path is None:
            config_path = default_config_path()

        config_data: dict[str, Any] = {}

        if config_path is not None and config_path.exists():
            try:
                with config_path.open(encoding="utf-8") as f:
                    raw_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(
                    f"Failed to read config file: {e}", details={"path": str(config_path)}
                ) from e
            if not isinstance(raw_config, dict):
                raise ConfigurationError(
                    "Config file must contain a mapping", details={"path": str(config_path)}
                )
            config_data = _expand_env_vars(raw_config)
            logger.debug("Loaded config from %s", config_path)

        # Environment variables win over the file, so only pass keys that are not set there.
        overridden = {
            name for name in cls.model_fields if f"TASKLIST_{name.upper()}" in os.environ
        }
        file_values = {k: v for k, v in config_data.items() if k not in overridden}

        try:
            return cls(**file_values)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(f"Invalid configuration: {first['msg']}", config_key=key) from e

    def resolve_home_dir(self) -> Path | None:
        """Get the directory holding the task file, or None if it cannot be found."""
        if self.home_dir is not None:
            return self.home_dir.expanduser()
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None

    def task_file_path(self) -> Path | None:
        """Get the full task file path, or None if the home directory is unknown."""
        home = self.resolve_home_dir()
        if home is None:
            return None
        return home / self.file_name


def _expand_env_vars(obj: Any) -> Any:
    """
    Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(obj, str):
        pattern = r"\$\{([^}:]+)(?::-([^}]*))?\}"

        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default = match.group(2) or ""
            return os.environ.get(var_name, default)

        return re.sub(pattern, replacer, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj
