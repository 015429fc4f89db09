"""In-memory implementation of EmotionRepository."""

from moodguard.domain.entities import EmotionReading, EmotionState
from moodguard.domain.interfaces import EmotionRepository
from moodguard.service.emotion import EmotionSettings, emotion_settings


class InMemoryEmotionRepository(EmotionRepository):
    """Session-scoped emotion state with a capped reading history."""

    def __init__(
        self,
        state: EmotionState | None = None,
        settings: EmotionSettings = emotion_settings,
    ):
        self._state = state or EmotionState()
        self._history_limit = settings.history_limit

    async def get_state(self) -> EmotionState:
        return self._state

    async def record(self, reading: EmotionReading) -> EmotionState:
        self._state.current_emotion = reading.emotion
        self._state.confidence = reading.confidence
        # Keep the most recent readings only
        self._state.history = [*self._state.history, reading][-self._history_limit:]
        return self._state

    async def set_detection_enabled(self, enabled: bool) -> EmotionState:
        self._state.detection_enabled = enabled
        return self._state

    async def clear_history(self) -> EmotionState:
        self._state.history = []
        return self._state
