"""
Emotion Classifier for the MoodGuard risk engine.

Every emotion belongs to exactly one risk tier:

- Risky: emotions that tend to drive fast, reactive spending
- Cautious: emotions that tend to drive comfort spending or paralysis
- Balanced: emotions compatible with objective financial decisions

The partition is a static table, checked once at import time.
"""

from typing import Any, Dict, FrozenSet

from moodguard.domain.entities import Emotion, Tier
from moodguard.domain.exceptions import InvalidEmotionException


RISKY_EMOTIONS: FrozenSet[Emotion] = frozenset({
    Emotion.EXCITED,
    Emotion.ANGRY,
    Emotion.FRUSTRATED,
    Emotion.OVERWHELMED,
})
CAUTIOUS_EMOTIONS: FrozenSet[Emotion] = frozenset({
    Emotion.ANXIOUS,
    Emotion.SAD,
})
BALANCED_EMOTIONS: FrozenSet[Emotion] = frozenset({
    Emotion.NEUTRAL,
    Emotion.CONTENT,
    Emotion.CONFIDENT,
    Emotion.HAPPY,
})

TIER_MEMBERS: Dict[Tier, FrozenSet[Emotion]] = {
    Tier.RISKY: RISKY_EMOTIONS,
    Tier.CAUTIOUS: CAUTIOUS_EMOTIONS,
    Tier.BALANCED: BALANCED_EMOTIONS,
}


def _build_tier_table() -> Dict[Emotion, Tier]:
    table: Dict[Emotion, Tier] = {}
    for tier, members in TIER_MEMBERS.items():
        for emotion in members:
            if emotion in table:
                raise RuntimeError(
                    f"{emotion.value} is in both {table[emotion].value} and {tier.value}"
                )
            table[emotion] = tier

    missing = set(Emotion) - set(table)
    if missing:
        names = ", ".join(sorted(e.value for e in missing))
        raise RuntimeError(f"Emotions without a tier: {names}")
    return table


_TIER_BY_EMOTION = _build_tier_table()

_ICONS: Dict[Emotion, str] = {
    Emotion.HAPPY: "\U0001F60A",
    Emotion.SAD: "\U0001F614",
    Emotion.ANGRY: "\U0001F620",
    Emotion.ANXIOUS: "\U0001F630",
    Emotion.NEUTRAL: "\U0001F610",
    Emotion.EXCITED: "\U0001F929",
    Emotion.CONFIDENT: "\U0001F60E",
    Emotion.FRUSTRATED: "\U0001F624",
    Emotion.OVERWHELMED: "\U0001F635",
    Emotion.CONTENT: "\U0001F60C",
}
_DEFAULT_ICON = _ICONS[Emotion.NEUTRAL]


def coerce_emotion(value: Any) -> Emotion:
    """
    Convert an Emotion or its string label to an Emotion.

    Labels are matched case-insensitively with surrounding whitespace ignored.

    Raises:
        InvalidEmotionException: If the value is not one of the ten labels
    """
    if isinstance(value, Emotion):
        return value
    if isinstance(value, str):
        try:
            return Emotion(value.strip().lower())
        except ValueError:
            pass
    raise InvalidEmotionException(value)


def tier_of(emotion: Any) -> Tier:
    """
    Get the risk tier of an emotion.

    Args:
        emotion: An Emotion or its string label

    Returns:
        Exactly one of Tier.RISKY, Tier.CAUTIOUS, Tier.BALANCED

    Raises:
        InvalidEmotionException: If the value is not a known emotion
    """
    return _TIER_BY_EMOTION[coerce_emotion(emotion)]


def is_risky(emotion: Any) -> bool:
    return tier_of(emotion) == Tier.RISKY


def is_cautious(emotion: Any) -> bool:
    return tier_of(emotion) == Tier.CAUTIOUS


def is_balanced(emotion: Any) -> bool:
    return tier_of(emotion) == Tier.BALANCED


def emotion_label(emotion: Any) -> str:
    """Display label, e.g. "Overwhelmed"."""
    return coerce_emotion(emotion).value.capitalize()


def emotion_icon(emotion: Any) -> str:
    """Emoji for an emotion; neutral face if none is registered."""
    return _ICONS.get(coerce_emotion(emotion), _DEFAULT_ICON)
