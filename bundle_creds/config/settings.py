"""
Configuration system using Pydantic for type-safe settings management.

Settings come from, in order of precedence: explicit keyword arguments
(CLI options), ``BUNDLE_CREDS_*`` environment variables, an optional YAML
settings file, then the defaults below.

Example YAML settings file::

    home: ${HOME}/.bundle-creds
    bundle_file: porter.yaml
    default_output: json
    log_level: INFO
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bundle_creds.enums import OutputFormat
from bundle_creds.exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_home() -> Path:
    return Path.home() / ".bundle-creds"


class BundleCredsSettings(BaseSettings):
    """Main bundle-creds settings."""

    model_config = SettingsConfigDict(
        env_prefix="BUNDLE_CREDS_",
        case_sensitive=False,
    )

    home: Path = Field(default_factory=_default_home, description="Data home directory")
    credentials_directory: str = Field(
        default="credentials", description="Credential set directory, relative to home"
    )
    bundle_file: Path = Field(default=Path("bundle.yaml"), description="Bundle manifest used by generate")
    default_output: OutputFormat = Field(default=OutputFormat.TABLE, description="Default output format")
    log_level: str = Field(default="WARNING", description="Minimum log level")

    @field_validator("home", mode="after")
    @classmethod
    def expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}")
        return level

    @property
    def credentials_dir(self) -> Path:
        """Get the credential set directory as a Path object."""
        return self.home / self.credentials_directory

    @classmethod
    def from_yaml(cls, config_path: str | Path, **overrides: Any) -> BundleCredsSettings:
        """Load settings from a YAML file with environment variable interpolation.

        Supports ${VAR_NAME} and ${VAR_NAME:-default} substitution.

        Args:
            config_path: Path to YAML settings file
            **overrides: Values taking precedence over the file

        Returns:
            BundleCredsSettings instance

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            yaml_content = config_file.read_text()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        config_dict.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            """Process a single line, skipping YAML comments."""
            if line.lstrip().startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        return "\n".join(process_line(line) for line in content.split("\n"))


def load_settings(
    config_path: str | Path | None = None,
    home: str | None = None,
    log_level: str | None = None,
) -> BundleCredsSettings:
    """Build settings from an optional YAML file plus CLI overrides.

    Raises:
        ConfigurationError: If the settings file, an environment variable or
            an override is invalid
    """
    overrides = {"home": home, "log_level": log_level}
    if config_path:
        return BundleCredsSettings.from_yaml(config_path, **overrides)

    try:
        return BundleCredsSettings(**{key: value for key, value in overrides.items() if value is not None})
    except ValueError as e:
        raise ConfigurationError(f"Failed to validate configuration: {e}") from e
