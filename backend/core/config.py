"""
Configuration management for the employee directory service.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. The API, the database manager and the CLI all consume the
shared `settings` instance so that one `.env` file drives the whole process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, List, Optional

from pydantic import AnyUrl, Field, PositiveInt, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEVELOPMENT_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # General application settings
    API_TITLE: str = "Employee Directory API"
    API_VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production|test)$")

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: PositiveInt = 3000

    # Cross-origin callers allowed to send credentialed requests
    ALLOWED_ORIGINS: Annotated[Optional[List[str]], NoDecode] = None

    # Document store
    MONGODB_URL: AnyUrl = Field("mongodb://localhost:27017")
    MONGODB_DATABASE: str = "directory"
    MONGODB_COLLECTION: str = "employees"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: PositiveInt = 5000

    # Observability
    LOG_LEVEL: str = "INFO"
    ENABLE_TRACING: bool = False
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[AnyUrl] = None
    OTEL_EXPORTER_OTLP_HEADERS: Optional[str] = None

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_LEVEL")
    def _normalise_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _default_origins(self) -> "Settings":
        # Production never falls back to the localhost allow-list.
        if self.ALLOWED_ORIGINS is None:
            self.ALLOWED_ORIGINS = [] if self.ENVIRONMENT == "production" else list(DEVELOPMENT_ORIGINS)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
