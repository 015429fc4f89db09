"""Abstract interface for emotion detection providers."""

from abc import ABC, abstractmethod

from moodguard.domain.entities import EmotionReading


class EmotionDetector(ABC):
    """
    Interface for an emotion detection provider.

    Implementations return a reading asynchronously; a real provider would
    call a classifier service with its own retry policy.
    """

    @abstractmethod
    async def detect(self) -> EmotionReading:
        """
        Detect the user's current emotion.

        Returns:
            An EmotionReading with the emotion and a confidence in [0, 1]
        """
        ...
