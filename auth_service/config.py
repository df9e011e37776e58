"""Configuration management using pydantic-settings."""

from datetime import timedelta

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import duration

DEFAULT_JWT_SECRET = "change-me-in-production-use-env-var"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    port: int = 3002
    host: str = "0.0.0.0"
    cors_origin: str = "http://localhost:3000"

    # JWT Configuration
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_expires_in: str = "24h"

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 10

    # "test" builds the app without binding a socket
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("jwt_expires_in")
    @classmethod
    def check_expires_in(cls, value: str) -> str:
        duration.parse(value)
        return value

    @property
    def token_lifetime(self) -> timedelta:
        """Token lifetime parsed from JWT_EXPIRES_IN."""
        return duration.parse(self.jwt_expires_in)

    @property
    def is_test(self) -> bool:
        return self.app_env.lower() == "test"


settings = Settings()
