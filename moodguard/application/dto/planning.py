"""Data transfer objects for debt and savings planning."""

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from moodguard.domain.entities import (
    AutoSaveFrequency,
    Debt,
    DebtType,
    GoalCategory,
    SavingsGoal,
)
from moodguard.domain.exceptions import InvalidArgumentException
from moodguard.service.emotion import to_amount
from moodguard.service.planning import monthly_auto_save


def _check_amount(value, name: str, errors: List[str], allow_zero: bool = False) -> None:
    try:
        amount = to_amount(value)
    except InvalidArgumentException as exc:
        errors.append(f"{name}: {exc.message}")
        return
    if amount == 0 and not allow_zero:
        errors.append(f"{name} must be positive")


@dataclass(frozen=True)
class DebtRequest:
    """Input data for tracking a new debt."""
    name: str
    original_amount: Decimal
    current_balance: Decimal
    interest_rate: float
    type: DebtType = DebtType.CREDIT_CARD
    minimum_payment: Decimal = Decimal("0")

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        _check_amount(self.original_amount, "original_amount", errors)
        _check_amount(self.current_balance, "current_balance", errors)
        _check_amount(self.minimum_payment, "minimum_payment", errors, allow_zero=True)

        rate = self.interest_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            errors.append("interest_rate must be a number")
        elif not math.isfinite(rate) or rate <= 0:
            errors.append("interest_rate must be positive")

        return errors

    def to_entity(self) -> Debt:
        return Debt(
            name=self.name.strip(),
            type=self.type,
            original_amount=to_amount(self.original_amount),
            current_balance=to_amount(self.current_balance),
            interest_rate=float(self.interest_rate),
            minimum_payment=to_amount(self.minimum_payment),
        )


@dataclass(frozen=True)
class DebtDTO:
    id: str
    name: str
    type: str
    original_amount: float
    current_balance: float
    interest_rate: float
    minimum_payment: float

    @classmethod
    def from_entity(cls, debt: Debt) -> "DebtDTO":
        return cls(
            id=debt.id,
            name=debt.name,
            type=debt.type.value,
            original_amount=float(debt.original_amount),
            current_balance=float(debt.current_balance),
            interest_rate=debt.interest_rate,
            minimum_payment=float(debt.minimum_payment),
        )


@dataclass(frozen=True)
class DebtSummaryResponse:
    """
    Debt tracker overview.

    The avalanche and snowball lists hold debt ids in the order they should
    be paid down under each strategy.
    """

    total_debt: float
    total_original_debt: float
    total_minimum_payment: float
    average_interest_rate: float
    paid_off_ratio: float
    debts: List[DebtDTO]
    avalanche_order: List[str]
    snowball_order: List[str]


@dataclass(frozen=True)
class SavingsGoalRequest:
    """Input data for creating a savings goal."""
    name: str
    target_amount: Decimal
    saved_amount: Decimal = Decimal("0")
    category: GoalCategory = GoalCategory.OTHER
    end_date: Optional[date] = None
    auto_save: bool = False
    auto_save_amount: Decimal = Decimal("0")
    auto_save_frequency: AutoSaveFrequency = AutoSaveFrequency.MONTHLY

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        _check_amount(self.target_amount, "target_amount", errors)
        _check_amount(self.saved_amount, "saved_amount", errors, allow_zero=True)
        _check_amount(self.auto_save_amount, "auto_save_amount", errors, allow_zero=True)

        return errors

    def to_entity(self) -> SavingsGoal:
        return SavingsGoal(
            name=self.name.strip(),
            target_amount=to_amount(self.target_amount),
            saved_amount=to_amount(self.saved_amount),
            category=self.category,
            end_date=self.end_date,
            auto_save=self.auto_save,
            auto_save_amount=to_amount(self.auto_save_amount),
            auto_save_frequency=self.auto_save_frequency,
        )


@dataclass(frozen=True)
class SavingsGoalDTO:
    id: str
    name: str
    category: str
    target_amount: float
    saved_amount: float
    progress: float
    complete: bool
    end_date: Optional[str]
    auto_save: bool
    auto_save_amount: float
    auto_save_frequency: str
    monthly_auto_save: float

    @classmethod
    def from_entity(cls, goal: SavingsGoal) -> "SavingsGoalDTO":
        return cls(
            id=goal.id,
            name=goal.name,
            category=goal.category.value,
            target_amount=float(goal.target_amount),
            saved_amount=float(goal.saved_amount),
            progress=round(goal.progress, 4),
            complete=goal.is_complete,
            end_date=goal.end_date.isoformat() if goal.end_date else None,
            auto_save=goal.auto_save,
            auto_save_amount=float(goal.auto_save_amount),
            auto_save_frequency=goal.auto_save_frequency.value,
            monthly_auto_save=float(monthly_auto_save(goal)),
        )


@dataclass(frozen=True)
class SavingsSummaryResponse:
    """Savings goals with totals across all of them."""

    total_saved: float
    total_target: float
    monthly_auto_save: float
    goals: List[SavingsGoalDTO]
