"""Centralized configuration for generic-search using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine defaults loaded from ``GENERIC_SEARCH_*`` environment variables.

    Every value can also be overridden per engine or per call; these are only
    the defaults used by ``GenericSearch.from_settings()``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GENERIC_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    dedup_policy: Literal["identity", "value"] = Field(
        default="identity",
        description="identity keeps every match; value collapses matches sharing path and text",
    )
    max_results: int | None = Field(
        default=None,
        ge=1,
        description="Cap applied to a search's sorted results (unset = no cap)",
    )

    # Observability
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    tracing_enabled: bool = Field(default=True, description="Record OpenTelemetry spans for each pass")
    service_name: str = Field(default="generic-search", description="service.name resource attribute")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
