"""Client configuration: environment settings and the immutable per-client config."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (and an optional .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Jina API
    jina_api_key: str = Field(
        "", alias="JINA_API_KEY",
        description="Bearer token for the Jina API. Empty = no Authorization header is sent.",
    )
    jina_eu_compliance: bool = Field(
        False, alias="JINA_EU_COMPLIANCE",
        description="Route reader and search calls through the EU infrastructure (eu.r.jina.ai, eu.s.jina.ai).",
    )
    jina_http_timeout: float | None = Field(
        None, alias="JINA_HTTP_TIMEOUT",
        description="Local HTTP timeout in seconds. Unset = wait as long as the server keeps the connection open.",
    )

    # Logging
    log_level: str = Field(
        "INFO", alias="LOG_LEVEL",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL.",
    )
    log_file: str = Field(
        "", alias="LOG_FILE",
        description="Path to log file for file-based logging with rotation. Empty = console only.",
    )
    log_file_max_bytes: int = Field(
        10_485_760, alias="LOG_FILE_MAX_BYTES",
        description="Max size in bytes per log file before rotation. Default: 10 MB.",
    )
    log_file_backup_count: int = Field(
        5, alias="LOG_FILE_BACKUP_COUNT",
        description="Number of rotated backup log files to keep.",
    )


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Settings shared by every call a client makes. Never mutated after construction."""

    api_key: str = ""
    eu_compliance: bool = False
    timeout: float | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ClientConfig:
        return cls(
            api_key=settings.jina_api_key,
            eu_compliance=settings.jina_eu_compliance,
            timeout=settings.jina_http_timeout,
        )


Option = Callable[[ClientConfig], ClientConfig]


def new_config(*options: Option) -> ClientConfig:
    """Apply options, in order, to the default configuration."""
    config = ClientConfig()
    for option in options:
        config = option(config)
    return config


def with_api_key(api_key: str) -> Option:
    def _apply(config: ClientConfig) -> ClientConfig:
        return replace(config, api_key=api_key)

    return _apply


def with_eu_compliance() -> Option:
    """Keep reader and search processing inside EU jurisdiction for every call."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return replace(config, eu_compliance=True)

    return _apply


def with_timeout(seconds: float | None) -> Option:
    """Local HTTP timeout in seconds for the pool the client creates. None waits indefinitely."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return replace(config, timeout=seconds)

    return _apply
