"""
Spending Analytics for the MoodGuard dashboard.

This module aggregates committed transactions and accounts:
- Total balance across accounts
- Totals per transaction type
- Spending per category and per emotion
- Average expense and the impulse-purchase heuristic
"""

from decimal import Decimal
from typing import Dict, FrozenSet, Iterable, List

from moodguard.domain.entities import (
    Account,
    Emotion,
    Transaction,
    TransactionType,
)
from .settings import EmotionSettings, emotion_settings


IMPULSIVE_EMOTIONS: FrozenSet[Emotion] = frozenset({
    Emotion.SAD,
    Emotion.ANGRY,
    Emotion.EXCITED,
    Emotion.OVERWHELMED,
})

_ZERO = Decimal("0")
_CENT = Decimal("0.01")


def format_currency(amount: Decimal | float | int) -> str:
    """Format a dollar amount, e.g. ``$1,234.50`` or ``-$12.00``."""
    value = Decimal(str(amount)).quantize(_CENT)
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def total_balance(accounts: Iterable[Account]) -> Decimal:
    return sum((account.balance for account in accounts), _ZERO)


def _expenses(transactions: Iterable[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.is_expense]


def total_by_type(
    transactions: Iterable[Transaction],
    txn_type: TransactionType,
) -> Decimal:
    """Sum the amounts of all transactions of one type."""
    return sum((t.amount for t in transactions if t.type == txn_type), _ZERO)


def spending_by_category(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """Sum expense amounts per category, in first-seen order."""
    categories: Dict[str, Decimal] = {}
    for txn in _expenses(transactions):
        categories[txn.category] = categories.get(txn.category, _ZERO) + txn.amount
    return categories


def spending_by_emotion(transactions: Iterable[Transaction]) -> Dict[Emotion, Decimal]:
    """
    Sum expense amounts per emotion.

    Every emotion is present in the result; expenses without an emotion
    are not counted.
    """
    emotions: Dict[Emotion, Decimal] = {emotion: _ZERO for emotion in Emotion}
    for txn in _expenses(transactions):
        if txn.emotion is not None:
            emotions[txn.emotion] += txn.amount
    return emotions


def average_spending(transactions: Iterable[Transaction]) -> Decimal:
    """Average expense amount, or 0 when there are no expenses."""
    expenses = _expenses(transactions)
    if not expenses:
        return _ZERO
    return sum((t.amount for t in expenses), _ZERO) / len(expenses)


def is_impulse_purchase(
    transaction: Transaction,
    avg_spending: Decimal | float | int,
    settings: EmotionSettings = emotion_settings,
) -> bool:
    """
    Determine if an expense looks like an impulse purchase.

    An expense is impulsive when it was made in an impulsive emotion
    (sad, angry, excited, overwhelmed) and is well above the user's
    average expense.

    Args:
        transaction: The transaction to check
        avg_spending: Average expense amount in dollars
        settings: Emotion settings (uses defaults if not provided)

    Returns:
        True if the transaction is an impulse purchase
    """
    if transaction.type != TransactionType.EXPENSE:
        return False

    if transaction.emotion not in IMPULSIVE_EMOTIONS:
        return False

    limit = Decimal(str(avg_spending)) * Decimal(str(settings.impulse_multiplier))
    return transaction.amount > limit
