"""Emotion-related Pydantic schemas."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmotionSetRequestSchema(BaseModel):
    """Schema for PUT /v1/emotion request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "emotion": "angry",
                    "confidence": 0.9,
                }
            ]
        }
    )
    emotion: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="One of the ten emotion labels",
        examples=["angry"],
    )
    confidence: float = Field(
        1.0,
        ge=0.0,
        le=1.0,
        description="Confidence in the reported emotion (manual reports default to 1.0)",
        examples=[0.9],
    )

    @field_validator("emotion")
    @classmethod
    def normalize_emotion(cls, v: str) -> str:
        """Labels are case-insensitive."""
        return v.strip().lower()


class AdviceSchema(BaseModel):
    """Classification and advice for one emotion."""

    model_config = ConfigDict(from_attributes=True)

    emotion: str = Field(..., examples=["angry"])
    label: str = Field(..., examples=["Angry"])
    icon: str
    tier: str = Field(..., description="risky, cautious or balanced", examples=["risky"])
    advice: str
    good_time_to_invest: bool


class EmotionReadingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    emotion: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    timestamp: str


class EmotionStateSchema(BaseModel):
    """Schema for the current emotion state."""

    model_config = ConfigDict(from_attributes=True)

    current: AdviceSchema
    confidence: float = Field(..., ge=0.0, le=1.0)
    detection_enabled: bool
    history: List[EmotionReadingSchema]


class AdvisorMessageSchema(BaseModel):
    """Schema for POST /v1/advisor request body."""

    message: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        examples=["Should I invest in stocks today?"],
    )

    @field_validator("message")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v


class AdvisorReplySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    message: str
    reply: str
    topic: str = Field(..., description="invest, spend, save or general")
    emotion: str
    tier: str
