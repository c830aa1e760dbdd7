"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the app.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Database configuration
    DATABASE_URL: str

    # API parameters
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]
    SITE_URL: str = "https://vuelatour.com"
    ADMIN_API_TOKEN: Optional[str] = None
    SEED_DEMO_DATA: bool = False

    # Lead notification (caller side)
    NOTIFICATION_ENDPOINT_URL: str = "http://localhost:8000/api/send-notification"
    NOTIFICATION_TIMEOUT_SECONDS: int = 15
    NOTIFICATION_WORKERS: int = 2

    # Resend transactional email
    RESEND_API_KEY: Optional[str] = None
    RESEND_API_URL: str = "https://api.resend.com/emails"
    NOTIFICATION_FROM: str = "Vuelatour Notificaciones <notificaciones@notify.vuelatour.com>"
    NOTIFICATION_TO: list[str] = ["info@vuelatour.com"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
