"""Pydantic schemas for API request/response validation."""

from .emotion import (
    EmotionSetRequestSchema,
    AdviceSchema,
    EmotionReadingSchema,
    EmotionStateSchema,
    AdvisorMessageSchema,
    AdvisorReplySchema,
)
from .transaction import (
    TransactionRequestSchema,
    TransactionSchema,
    SubmissionResponseSchema,
    TransactionListSchema,
)
from .finance import (
    AccountSchema,
    BudgetSchema,
    FinanceSummarySchema,
    InsightSchema,
    InsightListSchema,
)
from .planning import (
    DebtRequestSchema,
    DebtSchema,
    DebtSummarySchema,
    SavingsGoalRequestSchema,
    ContributionRequestSchema,
    SavingsGoalSchema,
    SavingsSummarySchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "EmotionSetRequestSchema",
    "AdviceSchema",
    "EmotionReadingSchema",
    "EmotionStateSchema",
    "AdvisorMessageSchema",
    "AdvisorReplySchema",
    "TransactionRequestSchema",
    "TransactionSchema",
    "SubmissionResponseSchema",
    "TransactionListSchema",
    "AccountSchema",
    "BudgetSchema",
    "FinanceSummarySchema",
    "InsightSchema",
    "InsightListSchema",
    "DebtRequestSchema",
    "DebtSchema",
    "DebtSummarySchema",
    "SavingsGoalRequestSchema",
    "ContributionRequestSchema",
    "SavingsGoalSchema",
    "SavingsSummarySchema",
    "ErrorResponseSchema",
]
