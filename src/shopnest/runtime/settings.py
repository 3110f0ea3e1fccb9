"""Environment-backed settings.

EnvironmentVariables holds primitive values read from the process
environment and an optional .env file. They select the configuration file
and can override values inside it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shopnest.runtime.config.config_data import ConfigData, validate_log_level


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    log_level: str | None = Field(default=None)
    config_path: Path = Field(
        default=Path("config.yaml"), validation_alias="SHOPNEST_CONFIG"
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str | None) -> str | None:
        return validate_log_level(value) if value else value

    def apply_overrides(self, config: ConfigData) -> ConfigData:
        """Return config with environment overrides applied."""
        if self.log_level:
            return config.model_copy(
                update={
                    "logging": config.logging.model_copy(
                        update={"level": self.log_level}
                    )
                }
            )
        return config
