"""Environment configuration and validation.

This module defines strongly-typed service settings loaded from environment variables (optionally
via a local `.env` file): the language-model gateway, request limits, the optional schema catalog
override and the HTTP listener.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    The language-model gateway is optional: when it is disabled (or fails at runtime) the pipeline
    degrades to deterministic keyword matching.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    llm_enabled: bool = Field(default=False, alias="LLM_ENABLED")
    llm_api_key: str | None = Field(default=None, alias="LLM_API_KEY")
    llm_model: str = Field(default="gpt-4o-mini", alias="LLM_MODEL")
    llm_api_base: str = Field(default="https://api.openai.com/v1", alias="LLM_API_BASE")
    llm_timeout_s: float = Field(default=30.0, alias="LLM_TIMEOUT_S", gt=0)
    llm_max_retries: int = Field(default=2, alias="LLM_MAX_RETRIES", ge=0, le=5)

    max_query_length: int = Field(default=1000, alias="MAX_QUERY_LENGTH", gt=0)
    schema_catalog_path: Path | None = Field(default=None, alias="SCHEMA_CATALOG_PATH")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level name and reject unknown levels at startup."""

        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported LOG_LEVEL: {value}")
        return level

    @field_validator("llm_api_base")
    @classmethod
    def validate_llm_api_base(cls, value: str) -> str:
        """Require an absolute http(s) URL for the gateway endpoint."""

        parts = urlsplit(value.strip())
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"LLM_API_BASE must be an http(s) URL: {value}")
        return value.strip()

    @model_validator(mode="after")
    def validate_llm_config(self) -> Settings:
        """Validate the optional gateway configuration.

        If the language-model gateway is enabled, an API key must be provided.
        """

        if self.llm_enabled and not self.llm_api_key:
            raise ValueError("LLM_API_KEY is required when LLM_ENABLED=true")
        return self


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
