"""Debt and savings-goal Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moodguard.domain.entities import AutoSaveFrequency, DebtType, GoalCategory


def _strip_name(v: str) -> str:
    if not v.strip():
        raise ValueError("cannot be empty or whitespace")
    return v.strip()


class DebtRequestSchema(BaseModel):
    """Schema for POST /v1/debts request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Store Card",
                    "type": "credit-card",
                    "original_amount": 2000,
                    "current_balance": 1200,
                    "interest_rate": 24.9,
                    "minimum_payment": 40,
                }
            ]
        }
    )
    name: str = Field(..., min_length=1, max_length=100)
    type: DebtType = Field(DebtType.CREDIT_CARD)
    original_amount: Decimal = Field(..., gt=0, decimal_places=2)
    current_balance: Decimal = Field(..., gt=0, decimal_places=2)
    interest_rate: float = Field(
        ...,
        gt=0,
        le=100,
        description="Annual interest rate in percent",
        examples=[24.9],
    )
    minimum_payment: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)


class DebtSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    original_amount: float
    current_balance: float
    interest_rate: float
    minimum_payment: float


class DebtSummarySchema(BaseModel):
    """Schema for GET /v1/debts."""

    model_config = ConfigDict(from_attributes=True)

    total_debt: float
    total_original_debt: float
    total_minimum_payment: float
    average_interest_rate: float = Field(
        ...,
        description="Interest rate weighted by current balance, in percent",
    )
    paid_off_ratio: float = Field(..., description="Share of original debt already repaid")
    debts: List[DebtSchema]
    avalanche_order: List[str] = Field(
        ...,
        description="Debt ids, highest interest rate first",
    )
    snowball_order: List[str] = Field(
        ...,
        description="Debt ids, smallest balance first",
    )


class SavingsGoalRequestSchema(BaseModel):
    """Schema for POST /v1/savings request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "New Laptop",
                    "target_amount": 1800,
                    "category": "other",
                    "auto_save": True,
                    "auto_save_amount": 50,
                    "auto_save_frequency": "weekly",
                }
            ]
        }
    )
    name: str = Field(..., min_length=1, max_length=100)
    target_amount: Decimal = Field(..., gt=0, decimal_places=2)
    saved_amount: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    category: GoalCategory = Field(GoalCategory.OTHER)
    end_date: Optional[date] = None
    auto_save: bool = False
    auto_save_amount: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    auto_save_frequency: AutoSaveFrequency = Field(AutoSaveFrequency.MONTHLY)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)


class ContributionRequestSchema(BaseModel):
    """Schema for POST /v1/savings/{goal_id}/contributions."""

    amount: Decimal = Field(..., gt=0, decimal_places=2, examples=[250])


class SavingsGoalSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    target_amount: float
    saved_amount: float
    progress: float = Field(..., ge=0.0, le=1.0, description="saved / target, capped at 1")
    complete: bool
    end_date: Optional[str] = None
    auto_save: bool
    auto_save_amount: float
    auto_save_frequency: str
    monthly_auto_save: float


class SavingsSummarySchema(BaseModel):
    """Schema for GET /v1/savings."""

    model_config = ConfigDict(from_attributes=True)

    total_saved: float
    total_target: float
    monthly_auto_save: float = Field(
        ...,
        description="Auto-save across active goals, normalized to a month",
    )
    goals: List[SavingsGoalSchema]
