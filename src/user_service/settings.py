"""Application configuration using Pydantic Settings.

This module centralizes runtime configuration for the user service. Values are
read from environment variables (or an optional ``.env`` file) once at startup
and fall back to the defaults below. A ``Settings`` instance is intended to be
retrieved via ``get_settings`` which caches the object for reuse across the
process.

Environment variables are unprefixed (e.g. ``PORT``, ``NATS_URL``) so the
service can be dropped into an existing container setup unchanged.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map directly to environment variables (case-insensitive).
    For example, ``nats_url`` <- ``NATS_URL``.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=3000,
        description="Server port",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )

    # Message bus settings
    nats_url: str = Field(
        default="nats://nats:4222",
        description="NATS server URL used for event publishing",
    )  # fmt: skip
    nats_enabled: bool = Field(
        default=True,
        description="Attempt a NATS connection at startup",
    )  # fmt: skip
    nats_connect_timeout: float = Field(
        default=2.0,
        gt=0,
        description="Seconds to wait for a single NATS connection attempt",
    )  # fmt: skip
    nats_max_reconnect_attempts: int = Field(
        default=3,
        ge=0,
        description="Reconnect attempts the NATS client makes before giving up",
    )  # fmt: skip
    nats_close_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for the NATS connection to drain on shutdown",
    )  # fmt: skip
    publish_grace_period: float = Field(
        default=2.0,
        ge=0,
        description="Seconds to wait for in-flight event publishes on shutdown",
    )  # fmt: skip

    # Build metadata
    app_version: str = Field(
        default="1.0.0",
        description="Application version string",
    )  # fmt: skip
    build_time: str = Field(
        default="development",
        description="Build timestamp of the running image",
    )  # fmt: skip
    git_commit: str = Field(
        default="unknown",
        description="Source revision the service was built from",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars
        env_file=".env",  # Optional .env loading (if present)
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object to ensure consistent config.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
