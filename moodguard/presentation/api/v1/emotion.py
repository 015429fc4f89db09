"""Emotion API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from moodguard.application.services import EmotionService
from moodguard.core.dependencies import get_emotion_service
from moodguard.presentation.schemas import (
    AdviceSchema,
    EmotionSetRequestSchema,
    EmotionStateSchema,
    ErrorResponseSchema,
)

emotion_router = APIRouter(
    prefix="/emotion",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Invalid emotion or confidence"},
    },
)


@emotion_router.get(
    "",
    response_model=EmotionStateSchema,
    summary="Get Emotion State",
    description="Current emotion with its tier and advice, plus the reading history.",
)
async def get_emotion_state(
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> EmotionStateSchema:
    state = await emotion_service.get_state()
    return EmotionStateSchema.model_validate(state)


@emotion_router.put(
    "",
    response_model=EmotionStateSchema,
    summary="Report Emotion",
    description="Manually set the current emotion and confidence.",
)
async def set_emotion(
    request: EmotionSetRequestSchema,
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> EmotionStateSchema:
    state = await emotion_service.set_emotion(request.emotion, request.confidence)
    return EmotionStateSchema.model_validate(state)


@emotion_router.post(
    "/detect",
    response_model=EmotionStateSchema,
    summary="Detect Emotion",
    description="""
    Run the simulated emotion detector and record its reading.

    The detector answers after a short delay with a random emotion.
    """,
    responses={
        409: {"model": ErrorResponseSchema, "description": "Detection disabled"},
        503: {"model": ErrorResponseSchema, "description": "Detection timed out"},
    },
)
async def detect_emotion(
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> EmotionStateSchema:
    state = await emotion_service.detect()
    return EmotionStateSchema.model_validate(state)


@emotion_router.post(
    "/toggle",
    response_model=EmotionStateSchema,
    summary="Toggle Emotion Detection",
)
async def toggle_detection(
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> EmotionStateSchema:
    state = await emotion_service.toggle_detection()
    return EmotionStateSchema.model_validate(state)


@emotion_router.delete(
    "/history",
    response_model=EmotionStateSchema,
    summary="Reset Emotion History",
)
async def reset_history(
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> EmotionStateSchema:
    state = await emotion_service.reset_history()
    return EmotionStateSchema.model_validate(state)


@emotion_router.get(
    "/{emotion}/advice",
    response_model=AdviceSchema,
    summary="Get Advice For Emotion",
)
async def get_advice(
    emotion: Annotated[str, Path(description="Emotion label", examples=["anxious"])],
    emotion_service: Annotated[EmotionService, Depends(get_emotion_service)],
) -> AdviceSchema:
    advice = emotion_service.get_advice(emotion)
    return AdviceSchema.model_validate(advice)
