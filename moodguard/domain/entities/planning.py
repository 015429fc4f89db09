"""Debt and savings-goal entities."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4


def new_planning_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


class DebtType(str, Enum):
    CREDIT_CARD = "credit-card"
    LOAN = "loan"
    MORTGAGE = "mortgage"
    STUDENT_LOAN = "student-loan"
    OTHER = "other"


@dataclass
class Debt:
    """
    A tracked debt.

    Attributes:
        original_amount: Amount originally borrowed, in dollars
        current_balance: Amount still owed, in dollars
        interest_rate: Annual rate in percent (19.99 means 19.99%)
        minimum_payment: Required monthly payment, in dollars
    """

    name: str
    type: DebtType
    original_amount: Decimal
    current_balance: Decimal
    interest_rate: float
    minimum_payment: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: new_planning_id("debt"))


class GoalCategory(str, Enum):
    EMERGENCY = "emergency"
    VACATION = "vacation"
    HOME = "home"
    CAR = "car"
    EDUCATION = "education"
    RETIREMENT = "retirement"
    OTHER = "other"


class AutoSaveFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass
class SavingsGoal:
    """A savings target with optional recurring auto-save."""

    name: str
    target_amount: Decimal
    saved_amount: Decimal = Decimal("0")
    category: GoalCategory = GoalCategory.OTHER
    end_date: Optional[date] = None
    auto_save: bool = False
    auto_save_amount: Decimal = Decimal("0")
    auto_save_frequency: AutoSaveFrequency = AutoSaveFrequency.MONTHLY
    id: str = field(default_factory=lambda: new_planning_id("goal"))

    @property
    def progress(self) -> float:
        """Fraction of the target saved, capped at 1.0."""
        if self.target_amount <= 0:
            return 0.0
        return min(1.0, float(self.saved_amount / self.target_amount))

    @property
    def is_complete(self) -> bool:
        return self.saved_amount >= self.target_amount
