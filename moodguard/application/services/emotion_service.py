"""Emotion service - orchestrates detection and the session emotion state."""

import asyncio

import structlog

from moodguard.core.config import settings
from moodguard.core.metrics import record_detection, track_detection_latency
from moodguard.domain.entities import EmotionReading
from moodguard.domain.exceptions import (
    EmotionDetectionDisabledException,
    EmotionDetectionTimeoutException,
)
from moodguard.domain.interfaces import EmotionDetector, EmotionRepository
from moodguard.application.dto import AdviceResponse, EmotionStateResponse
from moodguard.service.emotion import coerce_emotion, tier_of, validate_confidence

logger = structlog.get_logger(__name__)


class EmotionService:
    """
    Application service for the user's emotional context.
    """

    def __init__(
        self,
        emotion_repository: EmotionRepository,
        detector: EmotionDetector,
        detection_timeout: float | None = None,
    ):
        self._emotion_repo = emotion_repository
        self._detector = detector
        self._timeout = (
            settings.detection_timeout_seconds if detection_timeout is None else detection_timeout
        )

    async def get_state(self) -> EmotionStateResponse:
        state = await self._emotion_repo.get_state()
        return EmotionStateResponse.from_state(state)

    async def set_emotion(self, emotion: str, confidence: float) -> EmotionStateResponse:
        """
        Record a manually reported emotion.

        Raises:
            InvalidEmotionException: If the emotion is unknown
            InvalidArgumentException: If confidence is outside [0, 1]
        """
        reading = EmotionReading(
            emotion=coerce_emotion(emotion),
            confidence=validate_confidence(confidence),
        )
        state = await self._emotion_repo.record(reading)

        logger.info(
            "emotion_set",
            emotion=reading.emotion.value,
            confidence=reading.confidence,
            tier=tier_of(reading.emotion).value,
        )
        return EmotionStateResponse.from_state(state)

    async def detect(self) -> EmotionStateResponse:
        """
        Run the detection provider and record its reading.

        Raises:
            EmotionDetectionDisabledException: If detection is switched off
            EmotionDetectionTimeoutException: If the provider does not answer in time
        """
        state = await self._emotion_repo.get_state()
        if not state.detection_enabled:
            raise EmotionDetectionDisabledException()

        try:
            with track_detection_latency():
                reading = await asyncio.wait_for(self._detector.detect(), timeout=self._timeout)
        except asyncio.TimeoutError:
            record_detection(emotion="unknown", status="timeout")
            logger.warning("emotion_detection_timeout", timeout=self._timeout)
            raise EmotionDetectionTimeoutException(self._timeout)

        # Provider output is validated like any other caller input
        reading = EmotionReading(
            emotion=coerce_emotion(reading.emotion),
            confidence=validate_confidence(reading.confidence),
            timestamp=reading.timestamp,
        )
        state = await self._emotion_repo.record(reading)
        record_detection(emotion=reading.emotion.value)

        logger.info(
            "emotion_detected",
            emotion=reading.emotion.value,
            confidence=reading.confidence,
            tier=tier_of(reading.emotion).value,
        )
        return EmotionStateResponse.from_state(state)

    async def toggle_detection(self) -> EmotionStateResponse:
        state = await self._emotion_repo.get_state()
        state = await self._emotion_repo.set_detection_enabled(not state.detection_enabled)
        logger.info("emotion_detection_toggled", enabled=state.detection_enabled)
        return EmotionStateResponse.from_state(state)

    async def reset_history(self) -> EmotionStateResponse:
        state = await self._emotion_repo.clear_history()
        logger.info("emotion_history_reset")
        return EmotionStateResponse.from_state(state)

    def get_advice(self, emotion: str) -> AdviceResponse:
        """
        Get advice and classification for one emotion.

        Raises:
            InvalidEmotionException: If the emotion is unknown
        """
        return AdviceResponse.for_emotion(coerce_emotion(emotion))
