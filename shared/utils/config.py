"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Configuration
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None  # e.g. "logs/app.log"; console only when unset

    # Unpresentation Configuration
    DATE_FORMAT: str = "%d/%m/%Y"  # strftime directives, 31/12/2024
    FORMS_CONFIG_PATH: str = "config/forms/forms.yaml"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
