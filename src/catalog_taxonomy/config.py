"""Configuration management for Catalog Taxonomy.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the CATALOG_TAXONOMY_ prefix (e.g., CATALOG_TAXONOMY_PAYLOAD_MARKER).
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_TAXONOMY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog payload
    payload_marker: str = Field(
        default="valori: ",
        description=(
            "Literal text that precedes the comma-delimited catalog in a raw "
            "custom field payload"
        ),
    )

    # Report output
    report_path: Path = Field(
        default=Path("AreaApplicativoMapping.txt"),
        description="Default path of the area/application mapping report",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("payload_marker")
    @classmethod
    def _marker_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("payload_marker must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
