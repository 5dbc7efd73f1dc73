"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from clippath.engine.config import Quality


class Settings(BaseSettings):
    clippath_env: str = "development"
    clippath_log_level: str = "info"

    # Preset used when a request names no quality
    default_quality: Quality = Quality.MEDIUM

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
