"""Configuration management for shopbind.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. A client built from settings keeps
the values it was built with for its whole lifetime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopbind import __version__


class Settings(BaseSettings):
    """Client configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SHOPBIND_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "shopbind"
    environment: Literal["development", "production", "testing"] = "development"

    # Shop Settings
    shop_name: str | None = Field(
        default=None,
        description="Shop subdomain, expands to https://<shop_name>.myshopify.com",
    )
    base_url: str | None = Field(
        default=None,
        description="Full shop URL; takes precedence over shop_name",
    )
    access_token: str | None = Field(
        default=None,
        description="Admin API access token sent with every request",
    )

    # HTTP Settings
    timeout_seconds: float = 30.0
    user_agent: str = f"shopbind/{__version__}"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize the base URL so paths can be joined onto it."""
        if v is None:
            return v
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        return v

    @property
    def api_base_url(self) -> str | None:
        """Get the shop URL, derived from shop_name when base_url is unset."""
        if self.base_url:
            return self.base_url
        if self.shop_name:
            return f"https://{self.shop_name}.myshopify.com"
        return None

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
