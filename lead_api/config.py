"""Configuration management for the application."""

import logging
import secrets
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Placeholder secrets that must never sign tokens outside development
KNOWN_PLACEHOLDER_SECRETS = frozenset(
    {
        "change-me-in-production",
        "your-secret-key-change-in-production",
        "secret",
    }
)

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000,http://localhost:8080,http://127.0.0.1:3000,http://127.0.0.1:8080"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="production"
    )
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=3001)
    log_level: str = Field(default="INFO")

    # JWT
    jwt_secret: str | None = Field(default=None)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # CORS (comma separated)
    allowed_origins: str = Field(default=DEFAULT_ALLOWED_ORIGINS)

    # Uploads
    upload_dir: str = Field(default="uploads")
    max_upload_bytes: int = Field(default=100 * 1024 * 1024)  # 100MB
    upload_requires_auth: bool = Field(default=False)

    # Static frontend, served only when the directory exists
    frontend_dir: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_jwt_secret(self) -> "Settings":
        """Refuse to run without a real signing secret outside development."""
        if not self.jwt_secret:
            if not self.is_development:
                raise ValueError(f"JWT_SECRET must be set when ENVIRONMENT={self.environment}")
            logger.warning(
                "JWT_SECRET not set; using a random per-process secret. "
                "Tokens will not survive a restart."
            )
            self.jwt_secret = secrets.token_urlsafe(48)
        elif self.is_production and self.jwt_secret in KNOWN_PLACEHOLDER_SECRETS:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in an explicit development mode (development or test)."""
        return self.environment in ("development", "test")

    @property
    def debug_routes_enabled(self) -> bool:
        """Debug endpoints that read or wipe the user table are dev/test only."""
        return self.is_development

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins parsed from the comma separated setting."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
