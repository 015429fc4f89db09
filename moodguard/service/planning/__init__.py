"""
Debt and savings planning for the MoodGuard dashboard
"""

from .debt import (
    PayoffStrategy,
    total_debt,
    total_original_debt,
    total_minimum_payment,
    average_interest_rate,
    paid_off_ratio,
    avalanche_order,
    snowball_order,
    payoff_order,
)
from .savings import (
    MONTHLY_MULTIPLIER,
    total_saved,
    total_target,
    monthly_auto_save,
    total_monthly_auto_save,
    contribute,
    toggle_auto_save,
)

__all__ = [
    # Debt
    "PayoffStrategy",
    "total_debt",
    "total_original_debt",
    "total_minimum_payment",
    "average_interest_rate",
    "paid_off_ratio",
    "avalanche_order",
    "snowball_order",
    "payoff_order",
    # Savings
    "MONTHLY_MULTIPLIER",
    "total_saved",
    "total_target",
    "monthly_auto_save",
    "total_monthly_auto_save",
    "contribute",
    "toggle_auto_save",
]
