"""
Advice Generator for the MoodGuard risk engine.

Maps an emotion to a fixed recommendation sentence. Lookup dispatches on
the risk tier first and on the specific emotion second, falling back to a
generic sentence when a tier has no entry for the emotion.
"""

from typing import Any, Dict

from moodguard.domain.entities import Emotion, Tier
from .classifier import coerce_emotion, tier_of


GENERIC_ADVICE = (
    "Take a moment to review your financial plans before making any "
    "significant decisions."
)

TIER_ADVICE: Dict[Tier, Dict[Emotion, str]] = {
    Tier.RISKY: {
        Emotion.EXCITED: (
            "Excitement can make big purchases feel urgent. Sleep on any "
            "non-essential purchase and revisit it tomorrow."
        ),
        Emotion.ANGRY: (
            "Anger can lead to reactive financial decisions. Take a moment to "
            "calm down before proceeding with any transactions."
        ),
        Emotion.FRUSTRATED: (
            "Frustration often ends in spending to regain control. Step away "
            "from checkout and come back once the feeling has passed."
        ),
        Emotion.OVERWHELMED: (
            "Feeling overwhelmed makes it hard to weigh options. Postpone "
            "major financial decisions and focus on one small task at a time."
        ),
    },
    Tier.CAUTIOUS: {
        Emotion.SAD: (
            "When feeling sad, we often shop to feel better. Consider waiting "
            "24 hours before making non-essential purchases."
        ),
        Emotion.ANXIOUS: (
            "Anxiety might make you overly cautious or impulsive with money. "
            "Consider stable, low-risk options if investing today."
        ),
    },
    Tier.BALANCED: {
        Emotion.HAPPY: (
            "You're feeling happy! That's great, but be cautious about making "
            "impulsive purchases driven by excitement."
        ),
        Emotion.NEUTRAL: (
            "Your emotional state is balanced - this is a good time to review "
            "your financial plans objectively."
        ),
        Emotion.CONTENT: (
            "Feeling content is a good moment to set savings goals and check "
            "that your budgets still match your priorities."
        ),
        Emotion.CONFIDENT: (
            "Confidence helps with planning, but double-check the numbers "
            "before committing to large investments."
        ),
    },
}


def advice_for(emotion: Any) -> str:
    """
    Get the recommendation sentence for an emotion.

    Args:
        emotion: An Emotion or its string label

    Returns:
        A non-empty advice sentence

    Raises:
        InvalidEmotionException: If the value is not a known emotion
    """
    emotion = coerce_emotion(emotion)
    return TIER_ADVICE[tier_of(emotion)].get(emotion, GENERIC_ADVICE)


def is_good_time_to_invest(emotion: Any) -> bool:
    """Investment decisions are only encouraged in a Balanced state."""
    return tier_of(emotion) == Tier.BALANCED
