"""Data transfer objects for emotion operations."""

from dataclasses import dataclass
from typing import List

from moodguard.domain.entities import EmotionReading, EmotionState
from moodguard.service.emotion import (
    advice_for,
    emotion_icon,
    emotion_label,
    is_good_time_to_invest,
    tier_of,
)


@dataclass(frozen=True)
class EmotionReadingDTO:
    emotion: str
    confidence: float
    timestamp: str

    @classmethod
    def from_entity(cls, reading: EmotionReading) -> "EmotionReadingDTO":
        return cls(
            emotion=reading.emotion.value,
            confidence=reading.confidence,
            timestamp=reading.timestamp.isoformat() + "Z",
        )


@dataclass(frozen=True)
class AdviceResponse:
    """Advice and classification for one emotion."""

    emotion: str
    label: str
    icon: str
    tier: str
    advice: str
    good_time_to_invest: bool

    @classmethod
    def for_emotion(cls, emotion) -> "AdviceResponse":
        return cls(
            emotion=emotion.value,
            label=emotion_label(emotion),
            icon=emotion_icon(emotion),
            tier=tier_of(emotion).value,
            advice=advice_for(emotion),
            good_time_to_invest=is_good_time_to_invest(emotion),
        )


@dataclass(frozen=True)
class EmotionStateResponse:
    """Current emotion state with its derived advice."""

    current: AdviceResponse
    confidence: float
    detection_enabled: bool
    history: List[EmotionReadingDTO]

    @classmethod
    def from_state(cls, state: EmotionState) -> "EmotionStateResponse":
        return cls(
            current=AdviceResponse.for_emotion(state.current_emotion),
            confidence=state.confidence,
            detection_enabled=state.detection_enabled,
            history=[EmotionReadingDTO.from_entity(r) for r in state.history],
        )


@dataclass(frozen=True)
class AdvisorReplyResponse:
    """The advisor's answer to one chat message."""

    message: str
    reply: str
    topic: str
    emotion: str
    tier: str
