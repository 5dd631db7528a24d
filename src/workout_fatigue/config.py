"""Configuration settings for the workout fatigue engine."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/workout_fatigue/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_FATIGUE_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fallbacks for muscle groups outside the static tables
    default_base_fatigue: float = Field(10.0, ge=0)
    default_recovery_rate: float = Field(2.0, ge=0)  # fatigue points per minute

    # Caps
    per_set_cap: float = Field(50.0, ge=0)
    max_fatigue: float = Field(100.0, gt=0, le=100)

    # Recommendation thresholds
    rest_threshold: float = Field(70.0, ge=0, le=100)
    moderate_threshold: float = Field(40.0, ge=0, le=100)
    suggestion_threshold: float = Field(30.0, ge=0, le=100)

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
