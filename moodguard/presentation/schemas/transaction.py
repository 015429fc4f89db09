"""Transaction-related Pydantic schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moodguard.domain.entities import TransactionType


class TransactionRequestSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "amount": 649.99,
                    "category": "Shopping",
                    "description": "New headphones",
                    "type": "expense",
                }
            ]
        }
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        decimal_places=2,
        description="Amount in dollars",
        examples=[649.99],
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Spending or income category",
        examples=["Shopping"],
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="What the transaction is for",
        examples=["New headphones"],
    )
    type: TransactionType = Field(
        TransactionType.EXPENSE,
        description="expense, income, investment or saving",
    )
    emotion: Optional[str] = Field(
        None,
        description="Emotion at creation time (defaults to the current emotion)",
        examples=["excited"],
    )
    emotion_confidence: Optional[float] = Field(
        None,
        ge=0.0,
        le=1.0,
        description="Confidence for the emotion (defaults to the current confidence)",
    )

    @field_validator("category", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure text fields are not just whitespace."""
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v.strip()


class TransactionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: float
    category: str
    description: str
    type: str
    emotion: Optional[str] = None
    emotion_confidence: Optional[float] = None
    is_impulse: bool = False
    date: str


class SubmissionResponseSchema(BaseModel):
    """Schema for POST /v1/transactions response."""

    model_config = ConfigDict(from_attributes=True)

    transaction: TransactionSchema
    held: bool = Field(..., description="True if the transaction awaits manual approval")
    evaluated: bool = Field(
        ...,
        description="False when the hold check was skipped (inflows or detection off)",
    )
    tier: Optional[str] = None
    threshold: Optional[float] = Field(
        None,
        description="Confidence threshold used for the hold check",
    )
    advice: Optional[str] = None
    reason: Optional[str] = None


class TransactionListSchema(BaseModel):
    transactions: List[TransactionSchema]
