"""
Debt payoff analytics.

Aggregates tracked debts and orders them for the two common payoff
strategies:
- Avalanche: highest interest rate first (least interest paid overall)
- Snowball: smallest balance first (fastest early wins)
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, List

from moodguard.domain.entities import Debt


class PayoffStrategy(str, Enum):
    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"


_ZERO = Decimal("0")


def total_debt(debts: Iterable[Debt]) -> Decimal:
    """Sum of current balances."""
    return sum((d.current_balance for d in debts), _ZERO)


def total_original_debt(debts: Iterable[Debt]) -> Decimal:
    return sum((d.original_amount for d in debts), _ZERO)


def total_minimum_payment(debts: Iterable[Debt]) -> Decimal:
    return sum((d.minimum_payment for d in debts), _ZERO)


def average_interest_rate(debts: Iterable[Debt]) -> float:
    """
    Interest rate averaged over debts, weighted by current balance.

    Returns 0.0 when nothing is owed.
    """
    debts = list(debts)
    balance = total_debt(debts)
    if balance <= 0:
        return 0.0
    weighted = sum(
        (Decimal(str(d.interest_rate)) * d.current_balance for d in debts),
        _ZERO,
    )
    return float(weighted / balance)


def paid_off_ratio(debts: Iterable[Debt]) -> float:
    """Share of the originally borrowed total already repaid."""
    debts = list(debts)
    original = total_original_debt(debts)
    if original <= 0:
        return 0.0
    return float(1 - total_debt(debts) / original)


def avalanche_order(debts: Iterable[Debt]) -> List[Debt]:
    return sorted(debts, key=lambda d: d.interest_rate, reverse=True)


def snowball_order(debts: Iterable[Debt]) -> List[Debt]:
    return sorted(debts, key=lambda d: d.current_balance)


def payoff_order(debts: Iterable[Debt], strategy: PayoffStrategy) -> List[Debt]:
    """Order debts for the given strategy. Ties keep their input order."""
    if strategy == PayoffStrategy.AVALANCHE:
        return avalanche_order(debts)
    return snowball_order(debts)
