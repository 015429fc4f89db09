"""Savings-goal calculations."""

from dataclasses import replace
from decimal import Decimal
from typing import Dict, Iterable

from moodguard.domain.entities import AutoSaveFrequency, SavingsGoal
from moodguard.domain.exceptions import InvalidArgumentException
from moodguard.service.emotion import to_amount

# A month is counted as four weeks or thirty days
MONTHLY_MULTIPLIER: Dict[AutoSaveFrequency, int] = {
    AutoSaveFrequency.MONTHLY: 1,
    AutoSaveFrequency.WEEKLY: 4,
    AutoSaveFrequency.DAILY: 30,
}

_ZERO = Decimal("0")


def total_saved(goals: Iterable[SavingsGoal]) -> Decimal:
    return sum((g.saved_amount for g in goals), _ZERO)


def total_target(goals: Iterable[SavingsGoal]) -> Decimal:
    return sum((g.target_amount for g in goals), _ZERO)


def monthly_auto_save(goal: SavingsGoal) -> Decimal:
    """Auto-save amount normalized to a month, 0 when auto-save is off."""
    if not goal.auto_save:
        return _ZERO
    return goal.auto_save_amount * MONTHLY_MULTIPLIER[goal.auto_save_frequency]


def total_monthly_auto_save(goals: Iterable[SavingsGoal]) -> Decimal:
    return sum((monthly_auto_save(g) for g in goals), _ZERO)


def contribute(goal: SavingsGoal, amount) -> SavingsGoal:
    """
    Add a one-off contribution to a goal.

    Returns:
        A copy of the goal with the contribution applied

    Raises:
        InvalidArgumentException: If the amount is not a positive number
    """
    value = to_amount(amount)
    if value <= 0:
        raise InvalidArgumentException(f"contribution must be positive: {amount}")
    return replace(goal, saved_amount=goal.saved_amount + value)


def toggle_auto_save(goal: SavingsGoal) -> SavingsGoal:
    return replace(goal, auto_save=not goal.auto_save)
