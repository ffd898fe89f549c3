from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    # Application
    ENVIRONMENT: Literal["local", "development", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    # Trainer backend
    API_BASE_URL: str
    # None disables the timeout; a hung request parks the caller in-flight.
    HTTP_TIMEOUT: Optional[float] = None

    # Bot verification (no baked-in fallback key)
    RECAPTCHA_SITE_KEY: str
    RESET_VERIFICATION_ON_FAILURE: bool = True

    # Public surface
    INVITATION_RATE_LIMIT: str = "10/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Return the global settings instance, cached.
    """
    return Settings()
