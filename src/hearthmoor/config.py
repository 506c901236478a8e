"""Configuration management for Hearthmoor MUD using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="HEARTHMOOR_",
        extra="ignore",
    )

    # World Content
    content_dir: Path = Field(
        default=Path("./data/entities/areas"),
        description="Root directory holding one subdirectory per area",
    )
    l10n_scripts_dir: Path = Field(
        default=Path("./data/l10n/scripts/rooms"),
        description="Localization directory handed to room behaviors",
    )
    room_scripts_dir: Path = Field(
        default=Path("./data/scripts/rooms"),
        description="Behavior script directory handed to room behaviors",
    )
    manifest_name: str = Field(
        default="manifest.yml", description="File name of the per-area manifest"
    )
    reference_locale: str = Field(
        default="en", description="Locale used when flattening rooms for clients"
    )
    verbose_load: bool = Field(default=False, description="Log progress while loading the world")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level", alias="LOG_LEVEL")
    log_format: str = Field(
        default="console", description="Log format (console or json)", alias="LOG_FORMAT"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
