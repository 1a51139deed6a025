"""Configuration data models."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TMDbConfig(BaseModel):
    """TMDb API configuration."""

    api_key: str = Field(..., description="TMDb API key (v3)")
    base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDb API base URL")
    image_base_url: str = Field(
        default="https://image.tmdb.org/t/p", description="TMDb image CDN base URL"
    )
    language: str = Field(default="pt-BR", description="Language for search results")
    include_adult: bool = Field(default=False, description="Include adult titles in results")
    timeout: Optional[int] = Field(
        default=None, gt=0, description="Request timeout in seconds (transport default if unset)"
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key."""
        expanded = os.path.expandvars(v).strip()
        if not expanded or expanded.startswith("$"):
            raise ValueError("TMDb API key is empty; set it in the config file or TMDB_API_KEY")
        return expanded

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs."""
        return v.rstrip("/")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    tmdb: TMDbConfig = Field(..., description="TMDb configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
