"""In-memory implementation of FinanceRepository."""

from decimal import Decimal
from typing import Dict, List, Optional

from moodguard.domain.entities import (
    Account,
    AccountType,
    Budget,
    BudgetPeriod,
    FinancialInsight,
    Transaction,
)
from moodguard.domain.exceptions import AccountNotFoundException
from moodguard.domain.interfaces import FinanceRepository


def default_accounts() -> List[Account]:
    """Accounts every new session starts with."""
    return [
        Account(id="1", name="Main Checking", balance=Decimal("4250.75"), type=AccountType.CHECKING),
        Account(id="2", name="Savings", balance=Decimal("12750.50"), type=AccountType.SAVINGS),
        Account(id="3", name="Investment Portfolio", balance=Decimal("28450.25"), type=AccountType.INVESTMENT),
    ]


def default_budgets() -> List[Budget]:
    """Budgets every new session starts with."""
    return [
        Budget(id="1", category="Food", limit=Decimal("500"), spent=Decimal("320"), period=BudgetPeriod.MONTHLY),
        Budget(id="2", category="Entertainment", limit=Decimal("200"), spent=Decimal("150"), period=BudgetPeriod.MONTHLY),
        Budget(id="3", category="Shopping", limit=Decimal("300"), spent=Decimal("275"), period=BudgetPeriod.MONTHLY),
    ]


class InMemoryFinanceRepository(FinanceRepository):
    """
    Session-scoped finance state held in process memory.

    Lists are kept newest first. Nothing survives a restart.
    """

    def __init__(
        self,
        accounts: Optional[List[Account]] = None,
        budgets: Optional[List[Budget]] = None,
    ):
        self._accounts: Dict[str, Account] = {
            a.id: a for a in (accounts if accounts is not None else default_accounts())
        }
        self._budgets: List[Budget] = budgets if budgets is not None else default_budgets()
        self._transactions: List[Transaction] = []
        self._pending: List[Transaction] = []
        self._insights: List[FinancialInsight] = []

    async def add_transaction(self, transaction: Transaction) -> Transaction:
        self._transactions.insert(0, transaction)
        return transaction

    async def list_transactions(self) -> List[Transaction]:
        return list(self._transactions)

    async def add_pending(self, transaction: Transaction) -> Transaction:
        self._pending.insert(0, transaction)
        return transaction

    async def get_pending(self, transaction_id: str) -> Optional[Transaction]:
        return next((t for t in self._pending if t.id == transaction_id), None)

    async def remove_pending(self, transaction_id: str) -> Optional[Transaction]:
        pending = await self.get_pending(transaction_id)
        if pending is not None:
            self._pending = [t for t in self._pending if t.id != transaction_id]
        return pending

    async def list_pending(self) -> List[Transaction]:
        return list(self._pending)

    async def list_accounts(self) -> List[Account]:
        return list(self._accounts.values())

    async def get_account(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def update_account_balance(self, account_id: str, balance: Decimal) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundException(account_id)
        account.balance = balance
        return account

    async def list_budgets(self) -> List[Budget]:
        return list(self._budgets)

    async def record_budget_spending(self, category: str, amount: Decimal) -> Optional[Budget]:
        key = category.strip().lower()
        budget = next((b for b in self._budgets if b.category.lower() == key), None)
        if budget is not None:
            budget.spent += amount
        return budget

    async def add_insight(self, insight: FinancialInsight) -> FinancialInsight:
        self._insights.insert(0, insight)
        return insight

    async def list_insights(self, limit: int = 10) -> List[FinancialInsight]:
        return self._insights[:limit]
