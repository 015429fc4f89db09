"""Debt tracker API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from moodguard.application.dto import DebtRequest
from moodguard.application.services import DebtService
from moodguard.core.dependencies import get_debt_service
from moodguard.presentation.schemas import (
    DebtRequestSchema,
    DebtSchema,
    DebtSummarySchema,
    ErrorResponseSchema,
)

debt_router = APIRouter(prefix="/debts")


@debt_router.get(
    "",
    response_model=DebtSummarySchema,
    summary="Get Debt Summary",
    description="""
    Tracked debts with totals, the balance-weighted average interest rate
    and the avalanche (highest rate first) and snowball (smallest balance
    first) payoff orders.
    """,
)
async def get_debts(
    debt_service: Annotated[DebtService, Depends(get_debt_service)],
) -> DebtSummarySchema:
    summary = await debt_service.get_summary()
    return DebtSummarySchema.model_validate(summary)


@debt_router.post(
    "",
    response_model=DebtSchema,
    status_code=201,
    summary="Add Debt",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Invalid debt"},
    },
)
async def add_debt(
    request: DebtRequestSchema,
    debt_service: Annotated[DebtService, Depends(get_debt_service)],
) -> DebtSchema:
    dto = DebtRequest(
        name=request.name,
        type=request.type,
        original_amount=request.original_amount,
        current_balance=request.current_balance,
        interest_rate=request.interest_rate,
        minimum_payment=request.minimum_payment,
    )
    debt = await debt_service.add_debt(dto)
    return DebtSchema.model_validate(debt)


@debt_router.delete(
    "/{debt_id}",
    response_model=DebtSchema,
    summary="Remove Debt",
    description="Stop tracking a debt. Returns the removed debt.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Debt not found"},
    },
)
async def remove_debt(
    debt_id: Annotated[str, Path(description="ID of the debt")],
    debt_service: Annotated[DebtService, Depends(get_debt_service)],
) -> DebtSchema:
    debt = await debt_service.remove_debt(debt_id)
    return DebtSchema.model_validate(debt)
