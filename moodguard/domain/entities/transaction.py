"""Transaction entity representing a candidate or committed money movement."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from .emotion import Emotion


class TransactionType(str, Enum):
    """Classification of a transaction."""

    EXPENSE = "expense"
    INCOME = "income"
    INVESTMENT = "investment"
    SAVING = "saving"


OUTFLOW_TYPES = frozenset({TransactionType.EXPENSE, TransactionType.INVESTMENT})


def new_transaction_id(prefix: str = "tx") -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a transaction.

    Candidates are evaluated once at creation. Approving a pending candidate
    produces a new committed record rather than altering the candidate.

    Attributes:
        amount: Positive amount in dollars
        category: Spending or income category (e.g. "Food")
        description: Human-readable description
        type: Expense, income, investment or saving
        emotion: Emotion attached when the transaction was created
        emotion_confidence: Detection confidence for that emotion (0-1)
        is_impulse: True if flagged as an impulse purchase
    """

    amount: Decimal
    category: str
    description: str
    type: TransactionType
    emotion: Optional[Emotion] = None
    emotion_confidence: Optional[float] = None
    is_impulse: bool = False
    id: str = field(default_factory=new_transaction_id)
    date: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_outflow(self) -> bool:
        """Check if this transaction moves money out of the user's control."""
        return self.type in OUTFLOW_TYPES
