from __future__ import annotations

from pydantic import AnyUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Admin API settings, read from the environment or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    SUPABASE_URL: AnyUrl
    SUPABASE_SERVICE_ROLE_KEY: str
    LOG_LEVEL: str = "INFO"
    # JSON list in the environment, e.g. ADMIN_CORS_ORIGINS='["https://admin.example.com"]'
    ADMIN_CORS_ORIGINS: list[str] = ["http://localhost:5173"]


settings = Settings()
