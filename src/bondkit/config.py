"""Configuration management for bondkit."""

from __future__ import annotations

from functools import cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bondkit.errors import ConfigurationError


class Settings(BaseSettings):
    """Process-wide settings, read from `BONDKIT_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BONDKIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Host detection
    host_module: str = Field(
        default="bondkit_host",
        description="Module whose presence in sys.modules means a host runtime is attached",
    )
    inside_host: bool = Field(default=False, description="Force the process to report an attached host")

    # Plugins
    load_entrypoints: bool = Field(default=True, description="Load plugins from the `bondkit` entry point group")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")

    @field_validator("host_module")
    @classmethod
    def _host_module_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("host_module must not be empty")
        return value


@cache
def get_settings() -> Settings:
    """Get application settings.

    Raises:
        ConfigurationError: when an environment value fails validation.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid bondkit settings: {exc}") from exc
