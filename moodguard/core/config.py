"""Service configuration."""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide settings for the MoodGuard service.

    Every field can be set through a ``MOODGUARD_``-prefixed environment
    variable (``MOODGUARD_LOG_FORMAT=console``) or a ``.env`` file.
    Evaluator thresholds live separately in ``EmotionSettings``.
    """

    model_config = SettingsConfigDict(
        env_prefix="MOODGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "moodguard-gateway"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Mock detector timing
    detection_delay_seconds: float = Field(default=1.5, ge=0.0)
    detection_timeout_seconds: float = Field(default=5.0, gt=0.0)

    metrics_enabled: bool = True

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
