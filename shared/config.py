"""
Centralized configuration for the login-app backend.

All settings are loaded from environment variables with sensible defaults.
The environment name (development, production, ...) selects a profile of
overrides; anything set explicitly in the environment always wins.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


PLACEHOLDER_JWT_SECRET = "your-256-bit-secret-key-here-make-sure-its-long-enough"

# Applied only to fields the environment did not set explicitly
ENVIRONMENT_OVERRIDES: dict[str, dict[str, object]] = {
    "production": {"bcrypt_cost": 12, "log_level": "warning"},
    "development": {"bcrypt_cost": 8, "log_level": "debug"},
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "login-app"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Origin", "Content-Type", "Authorization"]

    # Auth
    jwt_secret: str = PLACEHOLDER_JWT_SECRET
    jwt_issuer: str = "login-app"
    token_duration_seconds: int = Field(default=24 * 60 * 60, gt=0)
    bcrypt_cost: int = Field(default=10, ge=4, le=31)

    # Logging
    log_level: str = "info"
    log_format: Literal["text", "json"] = "text"

    @model_validator(mode="after")
    def apply_environment_profile(self) -> "Settings":
        for name, value in ENVIRONMENT_OVERRIDES.get(self.environment, {}).items():
            if name not in self.model_fields_set:
                setattr(self, name, value)

        if self.is_production and self.jwt_secret in ("", PLACEHOLDER_JWT_SECRET):
            raise ConfigurationError(
                "JWT_SECRET must be set in production environment",
                code="INSECURE_JWT_SECRET",
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
