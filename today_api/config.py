"""Configuration settings for the application."""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Today API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # IANA identifier preferred; Windows identifiers are accepted as a fallback
    timezone_id: str = "America/New_York"

    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
