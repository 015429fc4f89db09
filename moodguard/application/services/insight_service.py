"""Insight service - dashboard summaries over the session finance state."""

from typing import List

from moodguard.domain.entities import TransactionType
from moodguard.domain.interfaces import FinanceRepository
from moodguard.application.dto import (
    AccountDTO,
    BudgetDTO,
    FinanceSummaryResponse,
    InsightDTO,
)
from moodguard.service.emotion import (
    average_spending,
    format_currency,
    spending_by_category,
    spending_by_emotion,
    total_balance,
    total_by_type,
)


class InsightService:
    """
    Application service for read-only dashboard views.
    """

    def __init__(self, finance_repository: FinanceRepository):
        self._finance_repo = finance_repository

    async def get_summary(self) -> FinanceSummaryResponse:
        """Build the dashboard summary from committed transactions."""
        accounts = await self._finance_repo.list_accounts()
        budgets = await self._finance_repo.list_budgets()
        transactions = await self._finance_repo.list_transactions()
        pending = await self._finance_repo.list_pending()

        balance = total_balance(accounts)

        return FinanceSummaryResponse(
            total_balance=float(balance),
            total_balance_display=format_currency(balance),
            total_income=float(total_by_type(transactions, TransactionType.INCOME)),
            total_expenses=float(total_by_type(transactions, TransactionType.EXPENSE)),
            average_spending=round(float(average_spending(transactions)), 2),
            pending_count=len(pending),
            accounts=[AccountDTO.from_entity(a) for a in accounts],
            budgets=[BudgetDTO.from_entity(b) for b in budgets],
            spending_by_category={
                category: float(amount)
                for category, amount in spending_by_category(transactions).items()
            },
            spending_by_emotion={
                emotion.value: float(amount)
                for emotion, amount in spending_by_emotion(transactions).items()
            },
        )

    async def list_insights(self, limit: int = 10) -> List[InsightDTO]:
        insights = await self._finance_repo.list_insights(limit=limit)
        return [InsightDTO.from_entity(i) for i in insights]
