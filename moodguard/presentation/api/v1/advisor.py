"""Advisor chat API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from moodguard.application.services import AdvisorService
from moodguard.core.dependencies import get_advisor_service
from moodguard.presentation.schemas import (
    AdvisorMessageSchema,
    AdvisorReplySchema,
    ErrorResponseSchema,
)

advisor_router = APIRouter(prefix="/advisor")


@advisor_router.post(
    "",
    response_model=AdvisorReplySchema,
    summary="Ask the Advisor",
    description="""
    Send a chat message to the financial advisor.

    The reply is chosen by topic (investing, spending, saving or anything
    else) and phrased around the current emotion.
    """,
    responses={
        422: {"model": ErrorResponseSchema, "description": "Empty message"},
    },
)
async def ask_advisor(
    request: AdvisorMessageSchema,
    advisor_service: Annotated[AdvisorService, Depends(get_advisor_service)],
) -> AdvisorReplySchema:
    reply = await advisor_service.reply(request.message)
    return AdvisorReplySchema.model_validate(reply)
