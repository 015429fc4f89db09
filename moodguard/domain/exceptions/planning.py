"""Debt and savings-goal exceptions."""

from .base import DomainException


class DebtNotFoundException(DomainException):
    code = "DEBT_NOT_FOUND"

    def __init__(self, debt_id: str):
        super().__init__(
            message=f"Debt not found: {debt_id}",
            details={"debt_id": debt_id},
        )
        self.debt_id = debt_id


class SavingsGoalNotFoundException(DomainException):
    code = "SAVINGS_GOAL_NOT_FOUND"

    def __init__(self, goal_id: str):
        super().__init__(
            message=f"Savings goal not found: {goal_id}",
            details={"goal_id": goal_id},
        )
        self.goal_id = goal_id
