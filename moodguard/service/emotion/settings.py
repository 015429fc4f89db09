"""
Evaluator Settings for the MoodGuard emotion-aware risk engine.

This module contains all configurable parameters for the hold evaluator,
the impulse-purchase heuristic and the simulated detection provider.

Environment variables use the EMOTION_ prefix:
    EMOTION_BASE_THRESHOLD=0.8
    EMOTION_LARGE_AMOUNT=500
    EMOTION_RISKY_FACTOR=0.7

Usage:
    from moodguard.service.emotion.settings import emotion_settings

    # Use default settings (loaded from env)
    factor = emotion_settings.risky_factor

    # Or create custom settings for testing
    custom = EmotionSettings(base_threshold=0.9)
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmotionSettings(BaseSettings):
    """
    Configurable parameters for the emotion-aware hold evaluator.

    All settings can be overridden via environment variables with EMOTION_ prefix.
    All monetary values are in dollars.
    All factors and confidences are 0-1.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMOTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Hold Threshold ===
    base_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Confidence threshold before amount and emotion adjustments",
    )

    # === Amount Bands (dollars) ===
    large_amount: Decimal = Field(
        default=Decimal("500"),
        ge=0,
        description="Amounts above this use the large-amount factor",
    )
    medium_amount: Decimal = Field(
        default=Decimal("100"),
        ge=0,
        description="Amounts above this (up to large_amount) use the medium-amount factor",
    )

    # === Amount Factors ===
    large_amount_factor: float = Field(
        default=0.7,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for large amounts",
    )
    medium_amount_factor: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for medium amounts",
    )
    small_amount_factor: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for small amounts",
    )

    # === Emotion Risk Factors ===
    risky_factor: float = Field(
        default=0.7,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for Risky-tier emotions",
    )
    cautious_factor: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for Cautious-tier emotions",
    )
    balanced_factor: float = Field(
        default=1.0,
        gt=0.0,
        le=1.0,
        description="Threshold multiplier for Balanced-tier emotions",
    )

    # === Impulse Purchases ===
    impulse_multiplier: float = Field(
        default=1.5,
        gt=0.0,
        description="Expense above average spending times this is a candidate impulse purchase",
    )

    # === Emotion History ===
    history_limit: int = Field(
        default=50,
        ge=1,
        description="Number of emotion readings retained in the session history",
    )

    # === Simulated Detection ===
    detection_min_confidence: float = Field(
        default=0.65,
        ge=0.0,
        le=1.0,
        description="Lowest confidence the mock detector reports",
    )
    detection_max_confidence: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Highest confidence the mock detector reports",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "EmotionSettings":
        """Ensure paired bounds are ordered."""
        if self.medium_amount > self.large_amount:
            raise ValueError(
                f"medium_amount ({self.medium_amount}) > large_amount ({self.large_amount})"
            )
        if self.detection_min_confidence > self.detection_max_confidence:
            raise ValueError(
                "detection_min_confidence must not exceed detection_max_confidence"
            )
        return self


@lru_cache
def get_emotion_settings() -> EmotionSettings:
    """Get cached emotion settings instance."""
    return EmotionSettings()


emotion_settings = get_emotion_settings()
