"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminAccountConfig(BaseModel):
    """One entry of the fixed administrator roster.

    Either a bcrypt ``password_hash`` or a plaintext ``password`` must be set.
    A plaintext password is hashed once when the roster is built.
    """

    id: str
    name: str
    email: str
    password: str | None = None
    password_hash: str | None = None

    @model_validator(mode="after")
    def _require_secret(self) -> "AdminAccountConfig":
        if not self.password and not self.password_hash:
            raise ValueError(f"admin account {self.email!r} needs a password or hash")
        return self


def _default_admin_accounts() -> list[AdminAccountConfig]:
    return [
        AdminAccountConfig(
            id="admin_001",
            name="System Administrator",
            email="admin@smartparenting.com",
            password="admin123",
        )
    ]


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./smartparenting.db", alias="DATABASE_URL"
    )

    # Tokens
    jwt_secret: str = Field(default="change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    token_expires_days: int = Field(
        default=7, alias="TOKEN_EXPIRES_DAYS", ge=1, le=30
    )

    # Password hashing
    bcrypt_rounds: int = Field(default=10, alias="BCRYPT_ROUNDS", ge=4, le=15)

    # Fixed administrator roster (JSON list when set from the environment)
    admin_accounts: list[AdminAccountConfig] = Field(
        default_factory=_default_admin_accounts, alias="ADMIN_ACCOUNTS"
    )

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def token_expires_in(self) -> timedelta:
        """Get token lifetime as timedelta."""
        return timedelta(days=self.token_expires_days)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
