"""Application configuration settings."""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STANDARDS_PATH = Path(__file__).parent / "standards.yaml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POWERSCORE_",
        extra="ignore",
    )

    # Application
    app_name: str = "PowerScore"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = True  # False renders human-readable console lines

    # Standards tables (percentile ladders, DOTS coefficients, anchor DOTS)
    standards_path: Path = DEFAULT_STANDARDS_PATH

    # e1RM formula reported by the one-rep-max endpoint when none is given
    default_one_rep_max_formula: Literal["epley", "brzycki", "lombardi", "average"] = "average"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
