# /app/config.py

"""
Application configuration settings.

Everything is read from environment variables (or a local `.env` file). An
empty `DATABASE_URL` is a valid configuration: the API still starts, the
signup endpoint reports a store error and the analytics endpoints degrade to
an empty state.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    # Database - e.g. postgresql+psycopg2://... in production, sqlite:///./waitlist.db locally
    DATABASE_URL: str = ""
    # Create missing tables at startup instead of relying on `alembic upgrade head`
    AUTO_CREATE_SCHEMA: bool = False

    # API settings
    PROJECT_NAME: str = "CortexCatalyst Waitlist API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Chart labels longer than this are truncated with "..."
    CHART_LABEL_MAX_LENGTH: int = 15

    @property
    def database_configured(self) -> bool:
        return bool(self.DATABASE_URL.strip())


def get_settings() -> Settings:
    """Builds a fresh Settings instance from the current environment."""
    return Settings()
