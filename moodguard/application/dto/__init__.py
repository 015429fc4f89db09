"""Data Transfer Objects for application layer."""

from .transaction import TransactionRequest, TransactionDTO, SubmissionResponse
from .emotion import (
    EmotionReadingDTO,
    AdviceResponse,
    EmotionStateResponse,
    AdvisorReplyResponse,
)
from .finance import (
    AccountDTO,
    BudgetDTO,
    InsightDTO,
    FinanceSummaryResponse,
)
from .planning import (
    DebtRequest,
    DebtDTO,
    DebtSummaryResponse,
    SavingsGoalRequest,
    SavingsGoalDTO,
    SavingsSummaryResponse,
)

__all__ = [
    "TransactionRequest",
    "TransactionDTO",
    "SubmissionResponse",
    "EmotionReadingDTO",
    "AdviceResponse",
    "EmotionStateResponse",
    "AdvisorReplyResponse",
    "AccountDTO",
    "BudgetDTO",
    "InsightDTO",
    "FinanceSummaryResponse",
    "DebtRequest",
    "DebtDTO",
    "DebtSummaryResponse",
    "SavingsGoalRequest",
    "SavingsGoalDTO",
    "SavingsSummaryResponse",
]
