"""In-memory implementation of PlanningRepository."""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from moodguard.domain.entities import (
    AutoSaveFrequency,
    Debt,
    DebtType,
    GoalCategory,
    SavingsGoal,
)
from moodguard.domain.exceptions import SavingsGoalNotFoundException
from moodguard.domain.interfaces import PlanningRepository


def default_debts() -> List[Debt]:
    """Debts every new session starts with."""
    return [
        Debt(
            id="1",
            name="Credit Card A",
            type=DebtType.CREDIT_CARD,
            original_amount=Decimal("8500"),
            current_balance=Decimal("4250"),
            interest_rate=19.99,
            minimum_payment=Decimal("85"),
        ),
        Debt(
            id="2",
            name="Auto Loan",
            type=DebtType.LOAN,
            original_amount=Decimal("32000"),
            current_balance=Decimal("18750"),
            interest_rate=4.25,
            minimum_payment=Decimal("450"),
        ),
        Debt(
            id="3",
            name="Student Loan",
            type=DebtType.STUDENT_LOAN,
            original_amount=Decimal("45000"),
            current_balance=Decimal("30000"),
            interest_rate=5.8,
            minimum_payment=Decimal("350"),
        ),
    ]


def default_goals() -> List[SavingsGoal]:
    """Savings goals every new session starts with."""
    return [
        SavingsGoal(
            id="1",
            name="Emergency Fund",
            target_amount=Decimal("15000"),
            saved_amount=Decimal("6000"),
            category=GoalCategory.EMERGENCY,
            end_date=date(2023, 12, 31),
            auto_save=True,
            auto_save_amount=Decimal("200"),
            auto_save_frequency=AutoSaveFrequency.MONTHLY,
        ),
        SavingsGoal(
            id="2",
            name="Summer Vacation",
            target_amount=Decimal("3000"),
            saved_amount=Decimal("1200"),
            category=GoalCategory.VACATION,
            end_date=date(2023, 6, 15),
            auto_save=True,
            auto_save_amount=Decimal("100"),
            auto_save_frequency=AutoSaveFrequency.WEEKLY,
        ),
        SavingsGoal(
            id="3",
            name="New Car",
            target_amount=Decimal("25000"),
            saved_amount=Decimal("5000"),
            category=GoalCategory.CAR,
            end_date=date(2024, 9, 30),
        ),
    ]


class InMemoryPlanningRepository(PlanningRepository):
    """Session-scoped debts and savings goals, kept in insertion order."""

    def __init__(
        self,
        debts: Optional[List[Debt]] = None,
        goals: Optional[List[SavingsGoal]] = None,
    ):
        seeded_debts = debts if debts is not None else default_debts()
        seeded_goals = goals if goals is not None else default_goals()
        self._debts: Dict[str, Debt] = {d.id: d for d in seeded_debts}
        self._goals: Dict[str, SavingsGoal] = {g.id: g for g in seeded_goals}

    async def list_debts(self) -> List[Debt]:
        return list(self._debts.values())

    async def add_debt(self, debt: Debt) -> Debt:
        self._debts[debt.id] = debt
        return debt

    async def remove_debt(self, debt_id: str) -> Optional[Debt]:
        return self._debts.pop(debt_id, None)

    async def list_goals(self) -> List[SavingsGoal]:
        return list(self._goals.values())

    async def get_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        return self._goals.get(goal_id)

    async def add_goal(self, goal: SavingsGoal) -> SavingsGoal:
        self._goals[goal.id] = goal
        return goal

    async def update_goal(self, goal: SavingsGoal) -> SavingsGoal:
        if goal.id not in self._goals:
            raise SavingsGoalNotFoundException(goal.id)
        self._goals[goal.id] = goal
        return goal

    async def remove_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        return self._goals.pop(goal_id, None)
