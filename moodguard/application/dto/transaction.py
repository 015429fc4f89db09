"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from moodguard.domain.entities import Transaction, TransactionType
from moodguard.domain.exceptions import InvalidArgumentException
from moodguard.service.emotion import to_amount


@dataclass(frozen=True)
class TransactionRequest:
    """Input data for submitting a candidate transaction."""
    amount: Decimal
    category: str
    description: str
    type: TransactionType = TransactionType.EXPENSE
    emotion: Optional[str] = None
    emotion_confidence: Optional[float] = None

    def validate(self) -> List[str]:
        errors = []

        try:
            if to_amount(self.amount) <= 0:
                errors.append("amount must be positive")
        except InvalidArgumentException as exc:
            errors.append(exc.message)

        if not self.category or not self.category.strip():
            errors.append("category is required")

        if not self.description or not self.description.strip():
            errors.append("description is required")

        if self.emotion_confidence is not None and not 0.0 <= self.emotion_confidence <= 1.0:
            errors.append("emotion_confidence must be between 0 and 1")

        return errors


@dataclass(frozen=True)
class TransactionDTO:
    """A transaction as returned to API callers."""

    id: str
    amount: float
    category: str
    description: str
    type: str
    emotion: Optional[str]
    emotion_confidence: Optional[float]
    is_impulse: bool
    date: str

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionDTO":
        return cls(
            id=transaction.id,
            amount=float(transaction.amount),
            category=transaction.category,
            description=transaction.description,
            type=transaction.type.value,
            emotion=transaction.emotion.value if transaction.emotion else None,
            emotion_confidence=transaction.emotion_confidence,
            is_impulse=transaction.is_impulse,
            date=transaction.date.isoformat() + "Z",
        )


@dataclass(frozen=True)
class SubmissionResponse:
    """Outcome of evaluating a candidate transaction."""

    transaction: TransactionDTO
    held: bool
    evaluated: bool
    tier: Optional[str]
    threshold: Optional[float]
    advice: Optional[str]
    reason: Optional[str]
