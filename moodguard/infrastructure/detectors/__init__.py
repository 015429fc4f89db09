"""Emotion detection provider implementations."""

from .mock_detector import MockEmotionDetector, DETECTABLE_EMOTIONS

__all__ = [
    "MockEmotionDetector",
    "DETECTABLE_EMOTIONS",
]
