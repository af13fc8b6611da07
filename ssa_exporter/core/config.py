"""Application configuration and settings management."""

import socket
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SSA_EXPORTER_",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="SSA Exporter", description="Human readable application name.")
    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("SSA_EXPORTER_PORT", "PORT"),
        description="Port the HTTP server listens on.",
    )
    ssacli_path: str = Field(default="ssacli", description="Path to the ssacli executable.")
    command_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a single ssacli invocation.",
    )
    hostname: str = Field(
        default_factory=socket.gethostname,
        description="Value of the hostname label attached to every sample.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()

