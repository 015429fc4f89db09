"""Liveness endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from moodguard import __version__
from moodguard.core.dependencies import get_emotion_repository
from moodguard.domain.interfaces import EmotionRepository

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    detection_enabled: bool


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Service liveness plus whether emotion detection is switched on.",
)
async def health_check(
    emotion_repository: Annotated[EmotionRepository, Depends(get_emotion_repository)],
) -> HealthResponse:
    state = await emotion_repository.get_state()
    return HealthResponse(version=__version__, detection_enabled=state.detection_enabled)
