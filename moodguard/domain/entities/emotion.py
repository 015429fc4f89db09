"""Emotion value types and the session-scoped emotion state."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class Emotion(str, Enum):
    """Discrete mood label attached to a user or a transaction."""

    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    NEUTRAL = "neutral"
    EXCITED = "excited"
    CONFIDENT = "confident"
    FRUSTRATED = "frustrated"
    OVERWHELMED = "overwhelmed"
    CONTENT = "content"


class Tier(str, Enum):
    """Risk category partitioning the emotion set."""

    RISKY = "risky"
    CAUTIOUS = "cautious"
    BALANCED = "balanced"


@dataclass(frozen=True)
class EmotionReading:
    """A single detected or manually set emotion with its confidence."""

    emotion: Emotion
    confidence: float
    timestamp: datetime = field(default_factory=datetime.utcnow)


@dataclass
class EmotionState:
    """
    The user's emotional context for the current session.

    Attributes:
        current_emotion: Most recent emotion reading
        confidence: Confidence of the most recent reading (0-1)
        history: Past readings, oldest first
        detection_enabled: Whether simulated detection may run
    """

    current_emotion: Emotion = Emotion.NEUTRAL
    confidence: float = 0.8
    history: List[EmotionReading] = field(default_factory=list)
    detection_enabled: bool = True
