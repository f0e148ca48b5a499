"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "StayDesk"
    debug: bool = False
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Database
    database_url: str
    auto_create_tables: bool = False

    # CORS (comma-separated)
    allowed_origins: str

    # Sessions
    require_auth: bool = False
    session_ttl_hours: int = 24
    password_bcrypt_rounds: int = 12

    # Booking policy
    active_booking_statuses: list[str] = ["confirmed"]
    reject_double_bookings: bool = False

    # Stripe
    stripe_secret_key: Optional[str] = None
    default_currency: str = "usd"

    @property
    def cors_origins(self) -> list[str]:
        """Resolved CORS origin list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
