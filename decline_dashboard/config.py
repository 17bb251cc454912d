"""Configuration management using Pydantic Settings"""

from datetime import date
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "decline-dashboard"
    log_level: str = "INFO"

    # Synthetic dataset
    generator_seed: Optional[int] = None  # None = fresh randomness per process
    generator_start_date: date = date(2025, 1, 1)
    generator_days: int = 21

    # Ranking
    top_decline_codes: int = 10
    top_processors_per_code: int = 3


settings = Settings()
