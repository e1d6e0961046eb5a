"""
Configuration management using Pydantic for hydroutils.
Provides type-safe defaults with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hydroutils.common.constants import FormatConstants, SystemConstants

logger = logging.getLogger(__name__)


class FormatConfig(BaseSettings):
    """String and date formatting defaults."""

    random_length: int = Field(
        default=FormatConstants.DEFAULT_RANDOM_LENGTH,
        ge=1,
        le=FormatConstants.MAX_RANDOM_LENGTH,
        description="Default length of generated random strings",
    )
    date_format: str = Field(
        default=FormatConstants.DEFAULT_DATE_FORMAT,
        min_length=1,
        description="Default format used by format_date",
    )

    model_config = SettingsConfigDict(env_prefix="HYDRO_UTILS_FORMAT_", extra="ignore")


class SystemConfig(BaseSettings):
    """Logging and stack rewriting configuration."""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    stack_namespace: str = Field(
        default=SystemConstants.DEFAULT_STACK_NAMESPACE,
        description="Package directory whose stack frames get shortened",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("stack_namespace")
    @classmethod
    def validate_stack_namespace(cls, v):
        """Namespace must be a single path component."""
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"Invalid stack namespace: {v!r}")
        return v

    model_config = SettingsConfigDict(env_prefix="HYDRO_UTILS_SYSTEM_", extra="ignore")


class Settings(BaseSettings):
    """Main library settings."""

    # Sub-configurations
    format: FormatConfig = Field(default_factory=FormatConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("HYDRO_UTILS_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                return values

            if isinstance(file_config, dict):
                # Merge file config with values (env vars take precedence)
                for key, value in file_config.items():
                    if key not in values or values[key] is None:
                        values[key] = value
                logger.debug(f"Loaded config file {config_file}")

        return values

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)

    model_config = SettingsConfigDict(
        env_prefix="HYDRO_UTILS_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()
