"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    webhook_prefix: str = "/api"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Basic authentication shared with the identity platform
    basic_auth_username: str = Field(
        default="",
        validation_alias=AliasChoices("basic_auth_username", "basic_auth__username"),
    )
    basic_auth_password: str = Field(
        default="",
        validation_alias=AliasChoices("basic_auth_password", "basic_auth__password"),
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "prod"

    @property
    def basic_auth_configured(self) -> bool:
        """Both halves of the credential pair are set."""
        return bool(self.basic_auth_username) and bool(self.basic_auth_password)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
