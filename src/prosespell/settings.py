"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for prosespell.

    Values are read from ``PROSESPELL_*`` environment variables and from a
    ``.env`` file in the working directory.  The allow-list and the grammar
    table are packaged with the tool and are not configurable here.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROSESPELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Batch
    concurrency: int = Field(default=5, ge=1)  # simultaneous in-flight files

    # Checker
    language: str = "en"
    max_suggestions: int = Field(default=30, ge=0)
