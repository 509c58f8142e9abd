"""
Configuration management for the 90s America archive.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # MongoDB Configuration
    mongodb_uri: Optional[str] = None
    mongodb_db: str = "90s-america"
    default_mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_timeout_ms: int = 5000

    # API Configuration
    port: int = 5000
    log_level: str = "INFO"
    api_title: str = "90s America API"
    api_version: str = "1.0.0"
    cors_origins: str = "*"

    # Frontend Configuration
    node_env: str = "development"
    serve_frontend: bool = False
    frontend_build_dir: Path = Path("../frontend/build")
    public_dir: Path = Path("public")

    # Image Ingestion Configuration
    images_folder: Path = Path("~/Downloads/90s America")
    upload_batch_size: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.node_env.lower() == "production"

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins into list."""
        return [o.strip() for o in self.cors_origins.split(',') if o.strip()]

    def get_ingest_mongodb_uri(self) -> str:
        """Connection string for the offline scripts, which fall back to a local server."""
        return self.mongodb_uri or self.default_mongodb_uri

    def get_images_folder(self) -> Path:
        return self.images_folder.expanduser()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
