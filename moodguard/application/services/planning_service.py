"""Planning services - debt tracker and savings goals."""

from typing import Any

import structlog

from moodguard.domain.exceptions import (
    DebtNotFoundException,
    InvalidArgumentException,
    SavingsGoalNotFoundException,
)
from moodguard.domain.interfaces import PlanningRepository
from moodguard.application.dto import (
    DebtDTO,
    DebtRequest,
    DebtSummaryResponse,
    SavingsGoalDTO,
    SavingsGoalRequest,
    SavingsSummaryResponse,
)
from moodguard.service.planning import (
    average_interest_rate,
    avalanche_order,
    contribute,
    paid_off_ratio,
    snowball_order,
    toggle_auto_save,
    total_debt,
    total_minimum_payment,
    total_monthly_auto_save,
    total_original_debt,
    total_saved,
    total_target,
)

logger = structlog.get_logger(__name__)


class DebtService:
    """Application service for the debt tracker."""

    def __init__(self, planning_repository: PlanningRepository):
        self._planning_repo = planning_repository

    async def get_summary(self) -> DebtSummaryResponse:
        debts = await self._planning_repo.list_debts()

        return DebtSummaryResponse(
            total_debt=float(total_debt(debts)),
            total_original_debt=float(total_original_debt(debts)),
            total_minimum_payment=float(total_minimum_payment(debts)),
            average_interest_rate=round(average_interest_rate(debts), 4),
            paid_off_ratio=round(paid_off_ratio(debts), 4),
            debts=[DebtDTO.from_entity(d) for d in debts],
            avalanche_order=[d.id for d in avalanche_order(debts)],
            snowball_order=[d.id for d in snowball_order(debts)],
        )

    async def add_debt(self, request: DebtRequest) -> DebtDTO:
        """
        Start tracking a debt.

        Raises:
            InvalidArgumentException: If the request fails validation
        """
        errors = request.validate()
        if errors:
            raise InvalidArgumentException("; ".join(errors))

        debt = await self._planning_repo.add_debt(request.to_entity())
        logger.info("debt_added", debt_id=debt.id, type=debt.type.value)
        return DebtDTO.from_entity(debt)

    async def remove_debt(self, debt_id: str) -> DebtDTO:
        """
        Stop tracking a debt.

        Raises:
            DebtNotFoundException: If no such debt
        """
        debt = await self._planning_repo.remove_debt(debt_id)
        if debt is None:
            raise DebtNotFoundException(debt_id)

        logger.info("debt_removed", debt_id=debt_id)
        return DebtDTO.from_entity(debt)


class SavingsService:
    """Application service for savings goals."""

    def __init__(self, planning_repository: PlanningRepository):
        self._planning_repo = planning_repository

    async def get_summary(self) -> SavingsSummaryResponse:
        goals = await self._planning_repo.list_goals()

        return SavingsSummaryResponse(
            total_saved=float(total_saved(goals)),
            total_target=float(total_target(goals)),
            monthly_auto_save=float(total_monthly_auto_save(goals)),
            goals=[SavingsGoalDTO.from_entity(g) for g in goals],
        )

    async def add_goal(self, request: SavingsGoalRequest) -> SavingsGoalDTO:
        """
        Create a savings goal.

        Raises:
            InvalidArgumentException: If the request fails validation
        """
        errors = request.validate()
        if errors:
            raise InvalidArgumentException("; ".join(errors))

        goal = await self._planning_repo.add_goal(request.to_entity())
        logger.info("savings_goal_added", goal_id=goal.id, category=goal.category.value)
        return SavingsGoalDTO.from_entity(goal)

    async def contribute(self, goal_id: str, amount: Any) -> SavingsGoalDTO:
        """
        Add a one-off contribution to a goal.

        Raises:
            SavingsGoalNotFoundException: If no such goal
            InvalidArgumentException: If the amount is not positive
        """
        goal = await self._require_goal(goal_id)
        updated = await self._planning_repo.update_goal(contribute(goal, amount))

        logger.info(
            "savings_contribution_added",
            goal_id=goal_id,
            saved_amount=float(updated.saved_amount),
        )
        return SavingsGoalDTO.from_entity(updated)

    async def toggle_auto_save(self, goal_id: str) -> SavingsGoalDTO:
        goal = await self._require_goal(goal_id)
        updated = await self._planning_repo.update_goal(toggle_auto_save(goal))

        logger.info("auto_save_toggled", goal_id=goal_id, auto_save=updated.auto_save)
        return SavingsGoalDTO.from_entity(updated)

    async def remove_goal(self, goal_id: str) -> SavingsGoalDTO:
        goal = await self._planning_repo.remove_goal(goal_id)
        if goal is None:
            raise SavingsGoalNotFoundException(goal_id)

        logger.info("savings_goal_removed", goal_id=goal_id)
        return SavingsGoalDTO.from_entity(goal)

    async def _require_goal(self, goal_id: str):
        goal = await self._planning_repo.get_goal(goal_id)
        if goal is None:
            raise SavingsGoalNotFoundException(goal_id)
        return goal
