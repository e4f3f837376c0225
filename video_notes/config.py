"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Video Notes Dashboard"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./video_notes.db"
    )

    # YouTube Data API. The key is optional: without it the
    # video and comment reads fail with a configuration error.
    YOUTUBE_API_KEY: str | None = os.getenv("YOUTUBE_API_KEY") or None
    YOUTUBE_API_BASE_URL: str = os.getenv(
        "YOUTUBE_API_BASE_URL",
        "https://www.googleapis.com/youtube/v3"
    )
    YOUTUBE_TIMEOUT_SECONDS: float = float(
        os.getenv("YOUTUBE_TIMEOUT_SECONDS", "10")
    )
    YOUTUBE_MAX_COMMENTS: int = int(os.getenv("YOUTUBE_MAX_COMMENTS", "20"))

    # Event log
    EVENT_LOG_QUERY_LIMIT: int = int(os.getenv("EVENT_LOG_QUERY_LIMIT", "50"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
