"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .validation import (
    InvalidEmotionException,
    InvalidArgumentException,
)
from .transaction import (
    PendingTransactionNotFoundException,
    AccountNotFoundException,
)
from .detection import (
    EmotionDetectionDisabledException,
    EmotionDetectionTimeoutException,
)
from .planning import (
    DebtNotFoundException,
    SavingsGoalNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidEmotionException",
    "InvalidArgumentException",
    "PendingTransactionNotFoundException",
    "AccountNotFoundException",
    "EmotionDetectionDisabledException",
    "EmotionDetectionTimeoutException",
    "DebtNotFoundException",
    "SavingsGoalNotFoundException",
]
