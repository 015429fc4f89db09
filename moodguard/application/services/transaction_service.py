"""Transaction service - orchestrates the candidate evaluation use case."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import structlog

from moodguard.core.metrics import (
    record_evaluation,
    record_impulse_purchase,
    record_pending_resolution,
)
from moodguard.domain.entities import (
    Emotion,
    FinancialInsight,
    ImpactLevel,
    Transaction,
    TransactionType,
)
from moodguard.domain.entities.transaction import new_transaction_id
from moodguard.domain.exceptions import (
    InvalidArgumentException,
    PendingTransactionNotFoundException,
)
from moodguard.domain.interfaces import EmotionRepository, FinanceRepository
from moodguard.application.dto import (
    SubmissionResponse,
    TransactionDTO,
    TransactionRequest,
)
from moodguard.service.emotion import (
    EmotionSettings,
    emotion_settings,
    advice_for,
    average_spending,
    coerce_emotion,
    explain_hold,
    format_currency,
    hold_threshold,
    is_impulse_purchase,
    should_hold,
    tier_of,
    to_amount,
    validate_confidence,
)

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for candidate transactions.

    A candidate is evaluated exactly once when it is submitted. If it is held
    it waits in the pending list until it is approved (committed as a new
    record) or rejected (discarded).
    """

    MAIN_ACCOUNT_ID = "1"

    def __init__(
        self,
        finance_repository: FinanceRepository,
        emotion_repository: EmotionRepository,
        settings: EmotionSettings = emotion_settings,
    ):
        self._finance_repo = finance_repository
        self._emotion_repo = emotion_repository
        self._settings = settings

    async def submit(self, request: TransactionRequest) -> SubmissionResponse:
        """
        Evaluate a candidate transaction and commit or hold it.

        Args:
            request: The candidate transaction

        Returns:
            SubmissionResponse with the stored transaction and the hold decision

        Raises:
            InvalidArgumentException: If request validation fails
            InvalidEmotionException: If the request names an unknown emotion
        """
        errors = request.validate()
        if errors:
            raise InvalidArgumentException("; ".join(errors))

        amount = to_amount(request.amount)
        state = await self._emotion_repo.get_state()

        if request.emotion is not None:
            emotion = coerce_emotion(request.emotion)
        else:
            emotion = state.current_emotion

        if request.emotion_confidence is not None:
            confidence = validate_confidence(request.emotion_confidence)
        else:
            confidence = state.confidence

        log = logger.bind(
            amount=str(amount),
            type=request.type.value,
            emotion=emotion.value,
            confidence=confidence,
        )
        log.info("transaction_submitted")

        candidate = Transaction(
            amount=amount,
            category=request.category.strip(),
            description=request.description.strip(),
            type=request.type,
            emotion=emotion,
            emotion_confidence=confidence,
        )

        committed = await self._finance_repo.list_transactions()
        avg_spending = average_spending(committed)
        if is_impulse_purchase(candidate, avg_spending, self._settings):
            candidate = replace(candidate, is_impulse=True)
            record_impulse_purchase()
            await self._add_impulse_insight(candidate, avg_spending)
            log.info("impulse_purchase_flagged", average_spending=str(avg_spending))

        # Holds only apply to outflows while emotion detection is on
        evaluated = state.detection_enabled and candidate.is_outflow
        tier = tier_of(emotion)

        if not evaluated:
            await self._commit(candidate)
            log.info("transaction_committed", transaction_id=candidate.id, evaluated=False)
            return SubmissionResponse(
                transaction=TransactionDTO.from_entity(candidate),
                held=False,
                evaluated=False,
                tier=None,
                threshold=None,
                advice=None,
                reason=None,
            )

        held = should_hold(emotion, amount, confidence, self._settings)
        threshold = hold_threshold(emotion, amount, self._settings)
        reason = explain_hold(emotion, amount, confidence, self._settings)
        record_evaluation(held, tier.value)

        if held:
            candidate = replace(candidate, id=new_transaction_id("pending"))
            await self._finance_repo.add_pending(candidate)
            await self._add_hold_insight(candidate, emotion)
            log.info(
                "transaction_held",
                transaction_id=candidate.id,
                tier=tier.value,
                threshold=round(threshold, 4),
            )
        else:
            await self._commit(candidate)
            log.info(
                "transaction_committed",
                transaction_id=candidate.id,
                tier=tier.value,
                threshold=round(threshold, 4),
            )

        return SubmissionResponse(
            transaction=TransactionDTO.from_entity(candidate),
            held=held,
            evaluated=True,
            tier=tier.value,
            threshold=round(threshold, 4),
            advice=advice_for(emotion),
            reason=reason,
        )

    async def approve(self, transaction_id: str) -> TransactionDTO:
        """
        Approve a pending transaction.

        The pending candidate is removed and a new committed record with a
        fresh id and date is stored.

        Raises:
            PendingTransactionNotFoundException: If no such pending transaction
        """
        pending = await self._finance_repo.remove_pending(transaction_id)
        if pending is None:
            raise PendingTransactionNotFoundException(transaction_id)

        committed = replace(
            pending,
            id=new_transaction_id(),
            date=datetime.utcnow(),
        )
        await self._commit(committed)
        record_pending_resolution("approved")

        logger.info(
            "pending_transaction_approved",
            pending_id=transaction_id,
            transaction_id=committed.id,
            amount=str(committed.amount),
        )
        return TransactionDTO.from_entity(committed)

    async def reject(self, transaction_id: str) -> TransactionDTO:
        """
        Reject and discard a pending transaction.

        Raises:
            PendingTransactionNotFoundException: If no such pending transaction
        """
        pending = await self._finance_repo.remove_pending(transaction_id)
        if pending is None:
            raise PendingTransactionNotFoundException(transaction_id)

        record_pending_resolution("rejected")
        logger.info("pending_transaction_rejected", pending_id=transaction_id)
        return TransactionDTO.from_entity(pending)

    async def list_transactions(
        self,
        txn_type: Optional[TransactionType] = None,
        limit: Optional[int] = None,
    ) -> List[TransactionDTO]:
        """Get committed transactions, newest first, optionally filtered by type."""
        transactions = await self._finance_repo.list_transactions()
        if txn_type is not None:
            transactions = [t for t in transactions if t.type == txn_type]
        if limit is not None:
            transactions = transactions[:limit]
        return [TransactionDTO.from_entity(t) for t in transactions]

    async def list_pending(self) -> List[TransactionDTO]:
        pending = await self._finance_repo.list_pending()
        return [TransactionDTO.from_entity(t) for t in pending]

    async def _commit(self, transaction: Transaction) -> None:
        """Store a committed transaction and apply it to balances and budgets."""
        await self._finance_repo.add_transaction(transaction)

        if transaction.is_expense:
            await self._adjust_main_balance(-transaction.amount)
            await self._finance_repo.record_budget_spending(
                transaction.category, transaction.amount
            )
        elif transaction.type == TransactionType.INCOME:
            await self._adjust_main_balance(transaction.amount)

    async def _adjust_main_balance(self, delta: Decimal) -> None:
        account = await self._finance_repo.get_account(self.MAIN_ACCOUNT_ID)
        if account is None:
            logger.warning("main_account_missing", account_id=self.MAIN_ACCOUNT_ID)
            return
        await self._finance_repo.update_account_balance(
            account.id, account.balance + delta
        )

    async def _add_hold_insight(self, transaction: Transaction, emotion: Emotion) -> None:
        await self._finance_repo.add_insight(
            FinancialInsight(
                title="Transaction held for review",
                description=(
                    f"A {format_currency(transaction.amount)} {transaction.type.value} "
                    f"for {transaction.category} was paused while you were feeling "
                    f"{emotion.value}. {advice_for(emotion)}"
                ),
                impact_level=ImpactLevel.HIGH,
                emotion_related=True,
                emotion=emotion,
            )
        )

    async def _add_impulse_insight(self, transaction: Transaction, avg_spending: Decimal) -> None:
        await self._finance_repo.add_insight(
            FinancialInsight(
                title="Possible impulse purchase",
                description=(
                    f"{format_currency(transaction.amount)} on {transaction.category} is well "
                    f"above your average expense of {format_currency(avg_spending)}."
                ),
                impact_level=ImpactLevel.MEDIUM,
                emotion_related=True,
                emotion=transaction.emotion,
            )
        )
