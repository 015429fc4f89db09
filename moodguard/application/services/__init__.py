"""Application services - use case orchestration."""

from .emotion_service import EmotionService
from .transaction_service import TransactionService
from .insight_service import InsightService
from .planning_service import DebtService, SavingsService
from .advisor_service import AdvisorService

__all__ = [
    "EmotionService",
    "TransactionService",
    "InsightService",
    "DebtService",
    "SavingsService",
    "AdvisorService",
]
