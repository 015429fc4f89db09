"""Savings goal API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from moodguard.application.dto import SavingsGoalRequest
from moodguard.application.services import SavingsService
from moodguard.core.dependencies import get_savings_service
from moodguard.presentation.schemas import (
    ContributionRequestSchema,
    ErrorResponseSchema,
    SavingsGoalRequestSchema,
    SavingsGoalSchema,
    SavingsSummarySchema,
)

savings_router = APIRouter(prefix="/savings")

GoalId = Annotated[str, Path(description="ID of the savings goal")]
GOAL_NOT_FOUND = {404: {"model": ErrorResponseSchema, "description": "Savings goal not found"}}


@savings_router.get(
    "",
    response_model=SavingsSummarySchema,
    summary="Get Savings Goals",
    description="Savings goals with total saved, total target and monthly auto-save.",
)
async def get_savings(
    savings_service: Annotated[SavingsService, Depends(get_savings_service)],
) -> SavingsSummarySchema:
    summary = await savings_service.get_summary()
    return SavingsSummarySchema.model_validate(summary)


@savings_router.post(
    "",
    response_model=SavingsGoalSchema,
    status_code=201,
    summary="Add Savings Goal",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Invalid savings goal"},
    },
)
async def add_goal(
    request: SavingsGoalRequestSchema,
    savings_service: Annotated[SavingsService, Depends(get_savings_service)],
) -> SavingsGoalSchema:
    dto = SavingsGoalRequest(
        name=request.name,
        target_amount=request.target_amount,
        saved_amount=request.saved_amount,
        category=request.category,
        end_date=request.end_date,
        auto_save=request.auto_save,
        auto_save_amount=request.auto_save_amount,
        auto_save_frequency=request.auto_save_frequency,
    )
    goal = await savings_service.add_goal(dto)
    return SavingsGoalSchema.model_validate(goal)


@savings_router.post(
    "/{goal_id}/contributions",
    response_model=SavingsGoalSchema,
    summary="Contribute to Goal",
    description="Add a one-off amount to a goal's saved total.",
    responses={
        **GOAL_NOT_FOUND,
        422: {"model": ErrorResponseSchema, "description": "Invalid amount"},
    },
)
async def contribute(
    goal_id: GoalId,
    request: ContributionRequestSchema,
    savings_service: Annotated[SavingsService, Depends(get_savings_service)],
) -> SavingsGoalSchema:
    goal = await savings_service.contribute(goal_id, request.amount)
    return SavingsGoalSchema.model_validate(goal)


@savings_router.post(
    "/{goal_id}/auto-save/toggle",
    response_model=SavingsGoalSchema,
    summary="Toggle Auto-Save",
    responses=GOAL_NOT_FOUND,
)
async def toggle_auto_save(
    goal_id: GoalId,
    savings_service: Annotated[SavingsService, Depends(get_savings_service)],
) -> SavingsGoalSchema:
    goal = await savings_service.toggle_auto_save(goal_id)
    return SavingsGoalSchema.model_validate(goal)


@savings_router.delete(
    "/{goal_id}",
    response_model=SavingsGoalSchema,
    summary="Remove Savings Goal",
    description="Delete a goal. Returns the removed goal.",
    responses=GOAL_NOT_FOUND,
)
async def remove_goal(
    goal_id: GoalId,
    savings_service: Annotated[SavingsService, Depends(get_savings_service)],
) -> SavingsGoalSchema:
    goal = await savings_service.remove_goal(goal_id)
    return SavingsGoalSchema.model_validate(goal)
