"""Finance dashboard Pydantic schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    balance: float
    balance_display: str = Field(..., examples=["$4,250.75"])


class BudgetSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category: str
    period: str
    limit: float
    spent: float
    remaining: float
    utilization: float = Field(..., ge=0.0, description="spent / limit")
    exceeded: bool


class FinanceSummarySchema(BaseModel):
    """Schema for GET /v1/finance/summary."""

    model_config = ConfigDict(from_attributes=True)

    total_balance: float
    total_balance_display: str
    total_income: float
    total_expenses: float
    average_spending: float
    pending_count: int = Field(..., ge=0)
    accounts: List[AccountSchema]
    budgets: List[BudgetSchema]
    spending_by_category: Dict[str, float]
    spending_by_emotion: Dict[str, float]


class InsightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    impact_level: str
    emotion_related: bool
    emotion: Optional[str] = None
    date: str


class InsightListSchema(BaseModel):
    insights: List[InsightSchema]
