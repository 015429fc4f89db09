"""Data transfer objects for the finance dashboard."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from moodguard.domain.entities import Account, Budget, FinancialInsight
from moodguard.service.emotion import format_currency


@dataclass(frozen=True)
class AccountDTO:
    id: str
    name: str
    type: str
    balance: float
    balance_display: str

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDTO":
        return cls(
            id=account.id,
            name=account.name,
            type=account.type.value,
            balance=float(account.balance),
            balance_display=format_currency(account.balance),
        )


@dataclass(frozen=True)
class BudgetDTO:
    id: str
    category: str
    period: str
    limit: float
    spent: float
    remaining: float
    utilization: float
    exceeded: bool

    @classmethod
    def from_entity(cls, budget: Budget) -> "BudgetDTO":
        return cls(
            id=budget.id,
            category=budget.category,
            period=budget.period.value,
            limit=float(budget.limit),
            spent=float(budget.spent),
            remaining=float(budget.remaining),
            utilization=round(budget.utilization, 4),
            exceeded=budget.is_exceeded,
        )


@dataclass(frozen=True)
class InsightDTO:
    id: str
    title: str
    description: str
    impact_level: str
    emotion_related: bool
    emotion: Optional[str]
    date: str

    @classmethod
    def from_entity(cls, insight: FinancialInsight) -> "InsightDTO":
        return cls(
            id=insight.id,
            title=insight.title,
            description=insight.description,
            impact_level=insight.impact_level.value,
            emotion_related=insight.emotion_related,
            emotion=insight.emotion.value if insight.emotion else None,
            date=insight.date.isoformat() + "Z",
        )


@dataclass(frozen=True)
class FinanceSummaryResponse:
    """Dashboard summary of the session's finances."""

    total_balance: float
    total_balance_display: str
    total_income: float
    total_expenses: float
    average_spending: float
    pending_count: int
    accounts: List[AccountDTO]
    budgets: List[BudgetDTO]
    spending_by_category: Dict[str, float]
    spending_by_emotion: Dict[str, float]

