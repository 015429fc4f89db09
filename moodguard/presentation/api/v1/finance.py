"""Finance dashboard API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from moodguard.application.services import InsightService
from moodguard.core.dependencies import get_insight_service
from moodguard.presentation.schemas import (
    FinanceSummarySchema,
    InsightListSchema,
    InsightSchema,
)

finance_router = APIRouter(prefix="/finance")


@finance_router.get(
    "/summary",
    response_model=FinanceSummarySchema,
    summary="Get Finance Summary",
    description="Balances, budgets and spending breakdowns for the session.",
)
async def get_summary(
    insight_service: Annotated[InsightService, Depends(get_insight_service)],
) -> FinanceSummarySchema:
    summary = await insight_service.get_summary()
    return FinanceSummarySchema.model_validate(summary)


@finance_router.get(
    "/insights",
    response_model=InsightListSchema,
    summary="List Insights",
    description="Latest financial insights, newest first.",
)
async def list_insights(
    insight_service: Annotated[InsightService, Depends(get_insight_service)],
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Maximum number of insights to return"),
    ] = 10,
) -> InsightListSchema:
    insights = await insight_service.list_insights(limit=limit)
    return InsightListSchema(
        insights=[InsightSchema.model_validate(i) for i in insights]
    )
