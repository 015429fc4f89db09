"""Transaction API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from moodguard.application.dto import TransactionRequest
from moodguard.application.services import TransactionService
from moodguard.core.dependencies import get_transaction_service
from moodguard.domain.entities import TransactionType
from moodguard.presentation.schemas import (
    ErrorResponseSchema,
    SubmissionResponseSchema,
    TransactionListSchema,
    TransactionRequestSchema,
    TransactionSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


@transaction_router.post(
    "",
    response_model=SubmissionResponseSchema,
    status_code=201,
    summary="Submit Transaction",
    description="""
    Submit a candidate transaction.

    Outflows made in a risky emotional state with high confidence are held
    for manual approval; everything else is committed immediately.
    """,
)
async def submit_transaction(
    request: TransactionRequestSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> SubmissionResponseSchema:
    dto = TransactionRequest(
        amount=request.amount,
        category=request.category,
        description=request.description,
        type=request.type,
        emotion=request.emotion,
        emotion_confidence=request.emotion_confidence,
    )
    response = await transaction_service.submit(dto)
    return SubmissionResponseSchema.model_validate(response)


@transaction_router.get(
    "",
    response_model=TransactionListSchema,
    summary="List Transactions",
    description="Committed transactions, newest first.",
)
async def list_transactions(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    type: Annotated[
        Optional[TransactionType],
        Query(description="Only return transactions of this type"),
    ] = None,
    limit: Annotated[
        int,
        Query(ge=1, le=500, description="Maximum number of transactions to return"),
    ] = 50,
) -> TransactionListSchema:
    transactions = await transaction_service.list_transactions(txn_type=type, limit=limit)
    return TransactionListSchema(
        transactions=[TransactionSchema.model_validate(t) for t in transactions]
    )


@transaction_router.get(
    "/pending",
    response_model=TransactionListSchema,
    summary="List Pending Transactions",
)
async def list_pending(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionListSchema:
    pending = await transaction_service.list_pending()
    return TransactionListSchema(
        transactions=[TransactionSchema.model_validate(t) for t in pending]
    )


@transaction_router.post(
    "/pending/{transaction_id}/approve",
    response_model=TransactionSchema,
    summary="Approve Pending Transaction",
    description="Commit a held transaction as a new record and apply it to the balance.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Pending transaction not found"},
    },
)
async def approve_pending(
    transaction_id: Annotated[str, Path(description="ID of the pending transaction")],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionSchema:
    committed = await transaction_service.approve(transaction_id)
    return TransactionSchema.model_validate(committed)


@transaction_router.post(
    "/pending/{transaction_id}/reject",
    response_model=TransactionSchema,
    summary="Reject Pending Transaction",
    description="Discard a held transaction.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Pending transaction not found"},
    },
)
async def reject_pending(
    transaction_id: Annotated[str, Path(description="ID of the pending transaction")],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionSchema:
    discarded = await transaction_service.reject(transaction_id)
    return TransactionSchema.model_validate(discarded)
