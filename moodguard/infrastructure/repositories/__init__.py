"""Repository implementations."""

from .finance_repository import (
    InMemoryFinanceRepository,
    default_accounts,
    default_budgets,
)
from .emotion_repository import InMemoryEmotionRepository
from .planning_repository import (
    InMemoryPlanningRepository,
    default_debts,
    default_goals,
)

__all__ = [
    "InMemoryFinanceRepository",
    "InMemoryEmotionRepository",
    "InMemoryPlanningRepository",
    "default_accounts",
    "default_budgets",
    "default_debts",
    "default_goals",
]
