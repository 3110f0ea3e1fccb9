"""Pydantic models for parsing the config.yaml configuration file.

These models mirror the structure of the ``config`` section of config.yaml.
Every field has a default, so the storefront runs without any file.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, field_validator

SAMPLE_PRODUCT_URL = "https://dummyjson.com/products/1"


def validate_log_level(value: str) -> str:
    """Upper-case a level name and check loguru knows it.

    Raises:
        ValueError: If loguru has no level with that name
    """
    level = value.upper()
    logger.level(level)
    return level


class ApiConfig(BaseModel):
    """Outbound demo API configuration."""

    sample_product_url: str = Field(
        default=SAMPLE_PRODUCT_URL, description="URL fetched by the API demo call"
    )


class StorefrontConfig(BaseModel):
    """Storefront output configuration."""

    language: Literal["en", "es"] = Field(
        default="en", description="Language of cart and order summary labels"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="WARNING", description="Minimum loguru level")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return validate_log_level(value)


class ConfigData(BaseModel):
    """Root configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    storefront: StorefrontConfig = Field(default_factory=StorefrontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
