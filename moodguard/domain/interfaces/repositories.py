"""Abstract repository interfaces for the session state."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from moodguard.domain.entities import (
    Account,
    Budget,
    Debt,
    EmotionReading,
    EmotionState,
    FinancialInsight,
    SavingsGoal,
    Transaction,
)


class FinanceRepository(ABC):
    """Interface for the finance state store."""

    @abstractmethod
    async def add_transaction(self, transaction: Transaction) -> Transaction:
        """Store a committed transaction (newest first)."""
        ...

    @abstractmethod
    async def list_transactions(self) -> List[Transaction]:
        """Get committed transactions, newest first."""
        ...

    @abstractmethod
    async def add_pending(self, transaction: Transaction) -> Transaction:
        """Park a candidate transaction for manual review."""
        ...

    @abstractmethod
    async def get_pending(self, transaction_id: str) -> Optional[Transaction]:
        """Get a pending transaction by ID, or None if not found."""
        ...

    @abstractmethod
    async def remove_pending(self, transaction_id: str) -> Optional[Transaction]:
        """Remove and return a pending transaction, or None if not found."""
        ...

    @abstractmethod
    async def list_pending(self) -> List[Transaction]:
        """Get pending transactions, newest first."""
        ...

    @abstractmethod
    async def list_accounts(self) -> List[Account]:
        ...

    @abstractmethod
    async def get_account(self, account_id: str) -> Optional[Account]:
        ...

    @abstractmethod
    async def update_account_balance(self, account_id: str, balance: Decimal) -> Account:
        """
        Set an account balance.

        Raises:
            AccountNotFoundException: If the account does not exist
        """
        ...

    @abstractmethod
    async def list_budgets(self) -> List[Budget]:
        ...

    @abstractmethod
    async def record_budget_spending(self, category: str, amount: Decimal) -> Optional[Budget]:
        """
        Add an expense to the budget for its category (case-insensitive).

        Returns:
            The updated budget, or None if no budget covers the category
        """
        ...

    @abstractmethod
    async def add_insight(self, insight: FinancialInsight) -> FinancialInsight:
        """Store an insight (newest first)."""
        ...

    @abstractmethod
    async def list_insights(self, limit: int = 10) -> List[FinancialInsight]:
        ...


class EmotionRepository(ABC):
    """Interface for the emotion state store."""

    @abstractmethod
    async def get_state(self) -> EmotionState:
        ...

    @abstractmethod
    async def record(self, reading: EmotionReading) -> EmotionState:
        """Make a reading current and append it to the capped history."""
        ...

    @abstractmethod
    async def set_detection_enabled(self, enabled: bool) -> EmotionState:
        ...

    @abstractmethod
    async def clear_history(self) -> EmotionState:
        ...


class PlanningRepository(ABC):
    """Interface for tracked debts and savings goals."""

    @abstractmethod
    async def list_debts(self) -> List[Debt]:
        """Get debts in the order they were added."""
        ...

    @abstractmethod
    async def add_debt(self, debt: Debt) -> Debt:
        ...

    @abstractmethod
    async def remove_debt(self, debt_id: str) -> Optional[Debt]:
        """Remove and return a debt, or None if not found."""
        ...

    @abstractmethod
    async def list_goals(self) -> List[SavingsGoal]:
        """Get savings goals in the order they were added."""
        ...

    @abstractmethod
    async def get_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        ...

    @abstractmethod
    async def add_goal(self, goal: SavingsGoal) -> SavingsGoal:
        ...

    @abstractmethod
    async def update_goal(self, goal: SavingsGoal) -> SavingsGoal:
        """
        Replace a stored goal with the same ID.

        Raises:
            SavingsGoalNotFoundException: If the goal does not exist
        """
        ...

    @abstractmethod
    async def remove_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        """Remove and return a goal, or None if not found."""
        ...
