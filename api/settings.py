"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing, validation,
and sensible defaults. Settings are loaded once at startup and cached.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars not defined here
        case_sensitive=False,  # Allow STRIPE_SECRET_KEY or stripe_secret_key
    )

    # === PocketBase Configuration ===
    pocketbase_url: str = Field(
        default="http://127.0.0.1:8090",
        description="PocketBase server URL",
    )
    pocketbase_admin_email: str = Field(
        default="admin@greencare.local",
        description="PocketBase superuser email for API authentication",
    )
    pocketbase_admin_password: str = Field(
        default="",
        description="PocketBase superuser password (required - no default for security)",
    )
    skip_pb_auth: bool = Field(
        default=False,
        description="Acquire the store without authenticating (for testing)",
    )

    # === Stripe Configuration ===
    stripe_secret_key: str = Field(
        default="",
        description="Stripe secret API key used to create payment intents",
    )
    payment_currency: str = Field(
        default="usd",
        description="ISO currency code for camp fees (two-decimal currencies only)",
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Registration Settings ===
    popular_camps_limit: int = Field(
        default=6,
        ge=1,
        description="Number of camps returned by /popular when no limit is given",
    )
    increment_on_register: bool = Field(
        default=True,
        description="Add one to the camp's participant_count when a participant registers",
    )

    @field_validator("pocketbase_admin_password", mode="after")
    @classmethod
    def validate_admin_password(cls, v: str) -> str:
        """Warn when the admin password is unset or uses an insecure default."""
        insecure_defaults = {"password", "admin", "123456", ""}
        if v in insecure_defaults:
            logger.warning(
                "SECURITY WARNING: POCKETBASE_ADMIN_PASSWORD is not set or uses an insecure default. "
                "Set a strong password in your .env file for production use."
            )
        return v

    @field_validator("payment_currency", mode="after")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        v = v.strip().lower()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"Invalid PAYMENT_CURRENCY: {v}. Must be a 3-letter ISO code")
        return v

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    Use this function to access settings throughout the codebase.
    """
    return Settings()
