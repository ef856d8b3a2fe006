"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (mock identity, ports, session storage)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface the mock backend binds to"
    )
    PORT: int = Field(
        default=4000,
        description="Port the mock backend listens on"
    )

    # Mock identity returned by auth.login
    MOCK_USER_NAME: str = Field(
        default="John Doe",
        description="Display name returned for every login"
    )
    MOCK_TOKEN: str = Field(
        default="mock-token-abc",
        description="Session token returned for every login"
    )

    # Client / front end
    API_BASE_URL: str = Field(
        default="http://localhost:4000",
        description="Base URL the front-end client calls"
    )
    SESSION_STORE_PATH: str = Field(
        default=".smartgov/storage.json",
        description="File backing the durable client-side key-value store"
    )
    SESSION_STORAGE_KEY: str = Field(
        default="smartgov_user",
        description="Key under which the logged-in user is stored"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    SLOW_REQUEST_SECONDS: float = Field(
        default=5.0,
        description="Requests slower than this are logged as warnings"
    )

    @validator("API_PREFIX")
    def validate_api_prefix(cls, v):
        """Prefix must be empty or start with a slash, without a trailing one."""
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return v.rstrip("/")

    @validator("MOCK_TOKEN")
    def validate_mock_token(cls, v):
        """An empty token would make every authenticated call fail with 401."""
        if not v:
            raise ValueError("MOCK_TOKEN must not be empty")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.MOCK_USER_NAME:
        errors.append("MOCK_USER_NAME is required")

    if not 0 < settings.PORT < 65536:
        errors.append("PORT must be between 1 and 65535")

    if not settings.SESSION_STORAGE_KEY:
        errors.append("SESSION_STORAGE_KEY is required")

    # Production-specific validations
    if settings.is_production:
        if settings.DEBUG:
            errors.append("DEBUG must be disabled in production")
        if "*" in settings.CORS_ORIGINS:
            errors.append("CORS_ORIGINS must list explicit origins in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
