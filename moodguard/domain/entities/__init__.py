"""Domain Entities - Core business objects."""

from .emotion import Emotion, Tier, EmotionReading, EmotionState
from .transaction import Transaction, TransactionType, OUTFLOW_TYPES
from .account import Account, AccountType, Budget, BudgetPeriod
from .insight import FinancialInsight, ImpactLevel
from .planning import (
    Debt,
    DebtType,
    SavingsGoal,
    GoalCategory,
    AutoSaveFrequency,
)

__all__ = [
    "Emotion",
    "Tier",
    "EmotionReading",
    "EmotionState",
    "Transaction",
    "TransactionType",
    "OUTFLOW_TYPES",
    "Account",
    "AccountType",
    "Budget",
    "BudgetPeriod",
    "FinancialInsight",
    "ImpactLevel",
    "Debt",
    "DebtType",
    "SavingsGoal",
    "GoalCategory",
    "AutoSaveFrequency",
]
