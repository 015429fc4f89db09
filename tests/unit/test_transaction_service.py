"""
Unit Tests for TransactionService.

Runs the submit/approve/reject workflow against the in-memory repositories
without going through HTTP.
"""

from decimal import Decimal

import pytest

from moodguard.application.dto import TransactionRequest
from moodguard.application.services import TransactionService
from moodguard.domain.entities import Emotion, EmotionReading, TransactionType
from moodguard.domain.exceptions import (
    InvalidArgumentException,
    InvalidEmotionException,
    PendingTransactionNotFoundException,
)
from moodguard.infrastructure.repositories import (
    InMemoryEmotionRepository,
    InMemoryFinanceRepository,
)


@pytest.fixture
def finance_repository() -> InMemoryFinanceRepository:
    return InMemoryFinanceRepository()


@pytest.fixture
def emotion_repository() -> InMemoryEmotionRepository:
    return InMemoryEmotionRepository()


@pytest.fixture
def service(finance_repository, emotion_repository) -> TransactionService:
    return TransactionService(finance_repository, emotion_repository)


def expense(amount: str, emotion: str | None = None, confidence: float | None = None, **kwargs):
    return TransactionRequest(
        amount=Decimal(amount),
        category=kwargs.pop("category", "Shopping"),
        description=kwargs.pop("description", "Purchase"),
        emotion=emotion,
        emotion_confidence=confidence,
        **kwargs,
    )


class TestSubmit:
    """Tests for TransactionService.submit()."""

    @pytest.mark.asyncio
    async def test_held_goes_to_pending(self, service, finance_repository):
        result = await service.submit(expense("600", "angry", 0.9))

        assert result.held is True
        assert result.evaluated is True
        assert result.threshold == pytest.approx(0.392)
        assert len(await finance_repository.list_pending()) == 1
        assert await finance_repository.list_transactions() == []

    @pytest.mark.asyncio
    async def test_committed_debits_main_account(self, service, finance_repository):
        await service.submit(expense("100", "happy", 0.9, category="Entertainment"))

        account = await finance_repository.get_account("1")
        assert account.balance == Decimal("4150.75")

        budgets = {b.category: b for b in await finance_repository.list_budgets()}
        assert budgets["Entertainment"].spent == Decimal("250")

    @pytest.mark.asyncio
    async def test_saving_leaves_balance_untouched(self, service, finance_repository):
        result = await service.submit(expense("200", "angry", 1.0, type=TransactionType.SAVING))

        assert result.evaluated is False
        account = await finance_repository.get_account("1")
        assert account.balance == Decimal("4250.75")

    @pytest.mark.asyncio
    async def test_uses_current_state(self, service, emotion_repository):
        await emotion_repository.record(EmotionReading(emotion=Emotion.OVERWHELMED, confidence=0.99))

        result = await service.submit(expense("20"))

        assert result.transaction.emotion == "overwhelmed"
        assert result.held is True

    @pytest.mark.asyncio
    async def test_blank_description_rejected(self, service):
        with pytest.raises(InvalidArgumentException):
            await service.submit(expense("10", description="  "))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), None])
    async def test_non_finite_amount_rejected(self, service, finance_repository, amount):
        request = TransactionRequest(amount=amount, category="Food", description="Snack")

        with pytest.raises(InvalidArgumentException):
            await service.submit(request)

        assert await finance_repository.list_transactions() == []

    @pytest.mark.asyncio
    async def test_unknown_emotion_rejected(self, service, finance_repository):
        with pytest.raises(InvalidEmotionException):
            await service.submit(expense("10", "grumpy", 0.5))

        assert await finance_repository.list_transactions() == []


class TestResolvePending:
    """Tests for approve() and reject()."""

    @pytest.mark.asyncio
    async def test_approve_replaces_id(self, service, finance_repository):
        held = await service.submit(expense("600", "excited", 0.95))

        committed = await service.approve(held.transaction.id)

        assert committed.id != held.transaction.id
        assert committed.amount == pytest.approx(600)
        assert await finance_repository.list_pending() == []
        account = await finance_repository.get_account("1")
        assert account.balance == Decimal("3650.75")

    @pytest.mark.asyncio
    async def test_reject_unknown(self, service):
        with pytest.raises(PendingTransactionNotFoundException) as exc_info:
            await service.reject("pending-nope")
        assert exc_info.value.code == "PENDING_TRANSACTION_NOT_FOUND"
