"""Account and budget entities."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    CREDIT = "credit"


class BudgetPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass
class Account:
    """A money account with a running balance in dollars."""

    id: str
    name: str
    balance: Decimal
    type: AccountType


@dataclass
class Budget:
    """A spending limit for one category over a period."""

    id: str
    category: str
    limit: Decimal
    spent: Decimal
    period: BudgetPeriod = BudgetPeriod.MONTHLY

    @property
    def remaining(self) -> Decimal:
        return self.limit - self.spent

    @property
    def utilization(self) -> float:
        """Fraction of the limit already spent (can exceed 1.0)."""
        if self.limit <= 0:
            return 0.0
        return float(self.spent / self.limit)

    @property
    def is_exceeded(self) -> bool:
        return self.spent > self.limit
