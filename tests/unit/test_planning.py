"""
Unit Tests for debt and savings planning.

These tests verify:
1. Debt totals and the balance-weighted interest rate
2. Avalanche and snowball payoff ordering
3. Savings totals and monthly auto-save normalization
4. Contributions and auto-save toggling
5. The planning services against the in-memory repository
"""

from decimal import Decimal

import pytest

from moodguard.application.dto import DebtRequest, SavingsGoalRequest
from moodguard.application.services import DebtService, SavingsService
from moodguard.domain.entities import (
    AutoSaveFrequency,
    Debt,
    DebtType,
    SavingsGoal,
)
from moodguard.domain.exceptions import (
    DebtNotFoundException,
    InvalidArgumentException,
    SavingsGoalNotFoundException,
)
from moodguard.infrastructure.repositories import (
    InMemoryPlanningRepository,
    default_debts,
    default_goals,
)
from moodguard.service.planning import (
    PayoffStrategy,
    average_interest_rate,
    avalanche_order,
    contribute,
    monthly_auto_save,
    paid_off_ratio,
    payoff_order,
    snowball_order,
    toggle_auto_save,
    total_debt,
    total_minimum_payment,
    total_monthly_auto_save,
    total_original_debt,
    total_saved,
    total_target,
)


# =============================================================================
# Test Fixtures
# =============================================================================

def make_debt(debt_id: str, balance: str, rate: float, original: str = "10000") -> Debt:
    return Debt(
        id=debt_id,
        name=f"Debt {debt_id}",
        type=DebtType.LOAN,
        original_amount=Decimal(original),
        current_balance=Decimal(balance),
        interest_rate=rate,
    )


def make_goal(amount: str, frequency: AutoSaveFrequency, auto_save: bool = True) -> SavingsGoal:
    return SavingsGoal(
        name="Goal",
        target_amount=Decimal("1000"),
        auto_save=auto_save,
        auto_save_amount=Decimal(amount),
        auto_save_frequency=frequency,
    )


@pytest.fixture
def repository() -> InMemoryPlanningRepository:
    return InMemoryPlanningRepository()


# =============================================================================
# Debt Totals
# =============================================================================

class TestDebtTotals:

    def test_seeded_totals(self):
        debts = default_debts()

        assert total_debt(debts) == Decimal("53000")
        assert total_original_debt(debts) == Decimal("85500")
        assert total_minimum_payment(debts) == Decimal("885")

    def test_average_rate_weighted_by_balance(self):
        rate = average_interest_rate(default_debts())

        assert rate == pytest.approx(338645 / 53000)

    def test_average_rate_single_debt(self):
        assert average_interest_rate([make_debt("a", "500", 12.5)]) == pytest.approx(12.5)

    def test_average_rate_no_debts(self):
        assert average_interest_rate([]) == 0.0

    def test_paid_off_ratio(self):
        assert paid_off_ratio(default_debts()) == pytest.approx(1 - 53000 / 85500)

    def test_paid_off_ratio_no_debts(self):
        assert paid_off_ratio([]) == 0.0


# =============================================================================
# Payoff Ordering
# =============================================================================

class TestPayoffOrder:

    def test_avalanche_highest_rate_first(self):
        assert [d.id for d in avalanche_order(default_debts())] == ["1", "3", "2"]

    def test_snowball_smallest_balance_first(self):
        assert [d.id for d in snowball_order(default_debts())] == ["1", "2", "3"]

    def test_ties_keep_insertion_order(self):
        debts = [make_debt("a", "100", 5.0), make_debt("b", "100", 5.0)]

        assert [d.id for d in avalanche_order(debts)] == ["a", "b"]
        assert [d.id for d in snowball_order(debts)] == ["a", "b"]

    @pytest.mark.parametrize(
        "strategy,expected",
        [
            (PayoffStrategy.AVALANCHE, ["high", "low"]),
            (PayoffStrategy.SNOWBALL, ["low", "high"]),
        ],
    )
    def test_payoff_order_by_strategy(self, strategy, expected):
        debts = [make_debt("low", "200", 3.0), make_debt("high", "900", 22.0)]

        assert [d.id for d in payoff_order(debts, strategy)] == expected

    def test_ordering_does_not_mutate_input(self):
        debts = default_debts()

        avalanche_order(debts)

        assert [d.id for d in debts] == ["1", "2", "3"]


# =============================================================================
# Savings
# =============================================================================

class TestSavingsTotals:

    def test_seeded_totals(self):
        goals = default_goals()

        assert total_saved(goals) == Decimal("12200")
        assert total_target(goals) == Decimal("43000")
        assert total_monthly_auto_save(goals) == Decimal("600")

    @pytest.mark.parametrize(
        "frequency,expected",
        [
            (AutoSaveFrequency.MONTHLY, Decimal("10")),
            (AutoSaveFrequency.WEEKLY, Decimal("40")),
            (AutoSaveFrequency.DAILY, Decimal("300")),
        ],
    )
    def test_monthly_normalization(self, frequency, expected):
        assert monthly_auto_save(make_goal("10", frequency)) == expected

    def test_disabled_auto_save_counts_zero(self):
        goal = make_goal("50", AutoSaveFrequency.DAILY, auto_save=False)

        assert monthly_auto_save(goal) == Decimal("0")

    def test_progress_capped(self):
        goal = SavingsGoal(name="Done", target_amount=Decimal("100"), saved_amount=Decimal("150"))

        assert goal.progress == 1.0
        assert goal.is_complete is True


class TestContributions:

    def test_contribute_returns_updated_copy(self):
        goal = default_goals()[0]

        updated = contribute(goal, Decimal("250"))

        assert updated.saved_amount == Decimal("6250")
        assert goal.saved_amount == Decimal("6000")
        assert updated.id == goal.id

    @pytest.mark.parametrize("amount", [0, -5, "abc", Decimal("NaN"), None])
    def test_invalid_contribution(self, amount):
        with pytest.raises(InvalidArgumentException):
            contribute(default_goals()[0], amount)

    def test_toggle_auto_save(self):
        goal = default_goals()[2]

        toggled = toggle_auto_save(goal)

        assert goal.auto_save is False
        assert toggled.auto_save is True
        assert toggle_auto_save(toggled).auto_save is False


# =============================================================================
# Services
# =============================================================================

class TestDebtService:

    @pytest.mark.asyncio
    async def test_add_then_summary(self, repository):
        service = DebtService(repository)

        added = await service.add_debt(
            DebtRequest(
                name="  Store Card ",
                original_amount=Decimal("2000"),
                current_balance=Decimal("500"),
                interest_rate=24.9,
                minimum_payment=Decimal("25"),
            )
        )
        summary = await service.get_summary()

        assert added.name == "Store Card"
        assert summary.total_debt == pytest.approx(53500)
        assert summary.avalanche_order[0] == added.id
        assert summary.snowball_order[0] == added.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", " "),
            ("original_amount", Decimal("0")),
            ("current_balance", Decimal("-1")),
            ("interest_rate", 0),
            ("interest_rate", float("nan")),
            ("minimum_payment", Decimal("Infinity")),
        ],
    )
    async def test_invalid_debt_rejected(self, repository, field, value):
        values = {
            "name": "Loan",
            "original_amount": Decimal("1000"),
            "current_balance": Decimal("800"),
            "interest_rate": 5.0,
        }
        values[field] = value

        with pytest.raises(InvalidArgumentException):
            await DebtService(repository).add_debt(DebtRequest(**values))

        assert len(await repository.list_debts()) == 3

    @pytest.mark.asyncio
    async def test_remove_unknown(self, repository):
        with pytest.raises(DebtNotFoundException) as exc_info:
            await DebtService(repository).remove_debt("debt-nope")

        assert exc_info.value.code == "DEBT_NOT_FOUND"
        assert exc_info.value.details == {"debt_id": "debt-nope"}


class TestSavingsService:

    @pytest.mark.asyncio
    async def test_contribute_persists(self, repository):
        service = SavingsService(repository)

        await service.contribute("2", Decimal("300"))
        summary = await service.get_summary()

        assert summary.total_saved == pytest.approx(12500)
        assert summary.goals[1].saved_amount == pytest.approx(1500)
        assert summary.goals[1].progress == pytest.approx(0.5)

    @pytest.mark.asyncio
    async def test_toggle_changes_monthly_total(self, repository):
        service = SavingsService(repository)

        toggled = await service.toggle_auto_save("1")
        summary = await service.get_summary()

        assert toggled.auto_save is False
        assert summary.monthly_auto_save == pytest.approx(400)

    @pytest.mark.asyncio
    async def test_add_goal_rejects_zero_target(self, repository):
        with pytest.raises(InvalidArgumentException):
            await SavingsService(repository).add_goal(
                SavingsGoalRequest(name="Nothing", target_amount=Decimal("0"))
            )

    @pytest.mark.asyncio
    async def test_unknown_goal(self, repository):
        service = SavingsService(repository)

        with pytest.raises(SavingsGoalNotFoundException):
            await service.contribute("goal-nope", Decimal("10"))
        with pytest.raises(SavingsGoalNotFoundException):
            await service.remove_goal("goal-nope")
