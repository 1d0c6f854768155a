# ecs_image_config/config/base.py

"""
Process-level settings for the validator, read from the environment.
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.validation.regions import DEFAULT_CATALOG, StaticRegionCatalog


class Environment(str, Enum):
    """Supported environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class ValidatorSettings(BaseSettings):
    """Settings shared by the loader and the CLI.

    Every field can be set through an ``ECS_IMAGE_`` prefixed environment
    variable, e.g. ``ECS_IMAGE_LOG_LEVEL=DEBUG``. List values are JSON encoded:
    ``ECS_IMAGE_EXTRA_REGIONS='["cn-chengdu"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECS_IMAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.TEXT

    extra_regions: list[str] = Field(
        default_factory=list,
        description="Regions accepted in addition to the built-in catalog",
    )
    skip_region_validation: bool = Field(
        default=False,
        description="Force the region bypass for every loaded configuration",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    def build_catalog(self) -> StaticRegionCatalog:
        """Region catalog implied by these settings."""
        if not self.extra_regions:
            return DEFAULT_CATALOG
        return DEFAULT_CATALOG.with_regions(self.extra_regions)
