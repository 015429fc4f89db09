"""Simulated emotion detection provider."""

import asyncio
import random
from typing import Sequence

import structlog

from moodguard.core.config import settings
from moodguard.domain.entities import Emotion, EmotionReading
from moodguard.domain.interfaces import EmotionDetector
from moodguard.service.emotion import EmotionSettings, emotion_settings

logger = structlog.get_logger(__name__)

# Labels the demo camera model can tell apart
DETECTABLE_EMOTIONS: Sequence[Emotion] = (
    Emotion.HAPPY,
    Emotion.SAD,
    Emotion.ANGRY,
    Emotion.ANXIOUS,
    Emotion.NEUTRAL,
)


class MockEmotionDetector(EmotionDetector):
    """
    Returns a random emotion after a short delay.

    Stands in for a real classifier service. Confidence is drawn uniformly
    from the configured range and rounded to two decimals.
    """

    def __init__(
        self,
        delay_seconds: float | None = None,
        emotions: Sequence[Emotion] = DETECTABLE_EMOTIONS,
        rng: random.Random | None = None,
        emotion_config: EmotionSettings = emotion_settings,
    ):
        self._delay = settings.detection_delay_seconds if delay_seconds is None else delay_seconds
        self._emotions = tuple(emotions)
        self._rng = rng or random.Random()
        self._min_confidence = emotion_config.detection_min_confidence
        self._max_confidence = emotion_config.detection_max_confidence

    async def detect(self) -> EmotionReading:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

        emotion = self._rng.choice(self._emotions)
        confidence = round(self._rng.uniform(self._min_confidence, self._max_confidence), 2)

        logger.debug(
            "mock_emotion_detected",
            emotion=emotion.value,
            confidence=confidence,
        )
        return EmotionReading(emotion=emotion, confidence=confidence)
