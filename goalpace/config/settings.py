from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    # Allocation defaults, applied when a goal has no explicit distribution settings
    default_distribution: str = Field(default="LINEAR", validation_alias="DEFAULT_DISTRIBUTION")
    default_intensity: float = Field(default=1.0, validation_alias="DEFAULT_INTENSITY")

    # Work-session conversion
    pomodoro_minutes: int = Field(default=25, validation_alias="POMODORO_MINUTES")

    # Daily offensive
    project_days: int = Field(default=67, validation_alias="PROJECT_DAYS")
    study_min_daily_goal_minutes: int = Field(default=15, validation_alias="STUDY_MIN_DAILY_GOAL_MINUTES")
    offensive_threshold: int = Field(default=50, validation_alias="OFFENSIVE_THRESHOLD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("default_distribution")
    @classmethod
    def _normalize_distribution(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"LINEAR", "EXPONENTIAL"}:
            logger.warning(f"Unknown DEFAULT_DISTRIBUTION={value!r}, falling back to LINEAR")
            return "LINEAR"
        return normalized

    @field_validator("default_intensity")
    @classmethod
    def _clamp_intensity(cls, value: float) -> float:
        return min(1.0, max(0.0, value))

    @field_validator("pomodoro_minutes", "project_days")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value


settings = Settings()
