"""Settings for the City Info API.

Read from environment variables, falling back to a local .env file.
Seed source, URL prefix, server address and CORS origins live here.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        # Allow extra fields from .env that aren't defined here
        extra="ignore",
    )

    # ===== Application =====
    PROJECT_NAME: str = "City Info API"
    API_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ===== Server =====
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # ===== Logging =====
    LOG_LEVEL: str = "INFO"

    # ===== Seed Data =====
    # JSON file with the cities to serve; built-in fixture when unset
    CITIES_SEED_FILE: Optional[str] = None

    # ===== CORS =====
    # Comma-separated list of allowed origins
    CORS_ALLOW_ORIGINS: str = (
        "http://localhost:3000,"
        "http://127.0.0.1:3000"
    )

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once per process.
    """
    return Settings()
