"""
Transaction Risk Evaluator for the MoodGuard risk engine.

Decides whether a candidate transaction should be held for manual approval
given the user's emotion, the detection confidence and the amount.

Algorithm:
    1. amount_factor: larger amounts get a smaller factor
    2. emotion_risk_factor: riskier tiers get a smaller factor
    3. threshold = base_threshold * amount_factor * emotion_risk_factor
    4. hold iff confidence > threshold and the emotion is in the Risky tier

Both factors lower the bar for intervention, but only Risky-tier emotions
can trigger an automatic hold. Cautious emotions still get their own factor
so that the threshold reported alongside a decision reflects the tier.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from moodguard.domain.entities import Tier
from moodguard.domain.exceptions import InvalidArgumentException
from .classifier import coerce_emotion, tier_of
from .settings import EmotionSettings, emotion_settings


def to_amount(amount: Any) -> Decimal:
    """
    Convert a numeric amount to a non-negative Decimal.

    Raises:
        InvalidArgumentException: If the amount is not a finite, non-negative number
    """
    if isinstance(amount, bool):
        raise InvalidArgumentException(f"amount must be a number, got {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise InvalidArgumentException(f"amount must be a number, got {amount!r}")

    if not value.is_finite():
        raise InvalidArgumentException(f"amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidArgumentException(f"amount cannot be negative: {amount}")
    return value


def validate_confidence(confidence: Any) -> float:
    """
    Ensure a confidence is a real number in [0, 1].

    Raises:
        InvalidArgumentException: If the confidence is outside [0, 1]
    """
    if isinstance(confidence, bool):
        raise InvalidArgumentException(f"confidence must be a number, got {confidence!r}")
    try:
        value = float(confidence)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentException(f"confidence must be a number, got {confidence!r}")

    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgumentException(f"confidence must be between 0 and 1: {confidence}")
    return value


def amount_factor(
    amount: Any,
    settings: EmotionSettings = emotion_settings,
) -> float:
    """
    Get the threshold multiplier for a transaction amount.

    Args:
        amount: Transaction amount in dollars (>= 0)
        settings: Emotion settings (uses defaults if not provided)

    Returns:
        0.7 above $500, 0.8 above $100, 0.9 otherwise (with default settings)
    """
    value = to_amount(amount)
    if value > settings.large_amount:
        return settings.large_amount_factor
    elif value > settings.medium_amount:
        return settings.medium_amount_factor
    else:
        return settings.small_amount_factor


def emotion_risk_factor(
    emotion: Any,
    settings: EmotionSettings = emotion_settings,
) -> float:
    """
    Get the threshold multiplier for an emotion's tier.

    Returns:
        0.7 for Risky, 0.8 for Cautious, 1.0 for Balanced (with default settings)
    """
    tier = tier_of(emotion)
    if tier == Tier.RISKY:
        return settings.risky_factor
    elif tier == Tier.CAUTIOUS:
        return settings.cautious_factor
    else:
        return settings.balanced_factor


def hold_threshold(
    emotion: Any,
    amount: Any,
    settings: EmotionSettings = emotion_settings,
) -> float:
    """
    Confidence above which a Risky-tier candidate is held.

    Args:
        emotion: An Emotion or its string label
        amount: Transaction amount in dollars (>= 0)
        settings: Emotion settings (uses defaults if not provided)

    Returns:
        base_threshold * amount_factor * emotion_risk_factor
    """
    return (
        settings.base_threshold
        * amount_factor(amount, settings)
        * emotion_risk_factor(emotion, settings)
    )


def should_hold(
    emotion: Any,
    amount: Any,
    confidence: Any,
    settings: EmotionSettings = emotion_settings,
) -> bool:
    """
    Decide whether a candidate transaction must wait for manual approval.

    Args:
        emotion: Emotion attached to the candidate
        amount: Transaction amount in dollars (>= 0)
        confidence: Detection confidence for the emotion (0-1)
        settings: Emotion settings (uses defaults if not provided)

    Returns:
        True if the transaction should be held

    Raises:
        InvalidEmotionException: If the emotion is unknown
        InvalidArgumentException: If amount < 0 or confidence outside [0, 1]
    """
    emotion = coerce_emotion(emotion)
    confidence = validate_confidence(confidence)
    threshold = hold_threshold(emotion, amount, settings)

    return confidence > threshold and tier_of(emotion) == Tier.RISKY


def explain_hold(
    emotion: Any,
    amount: Any,
    confidence: Any,
    settings: EmotionSettings = emotion_settings,
) -> str:
    """
    Generate a human-readable explanation of a hold decision.

    This can be used for:
    - Logging and debugging
    - Support team reference
    - The reason shown next to a pending transaction

    Returns:
        Multi-line explanation string
    """
    emotion = coerce_emotion(emotion)
    value = to_amount(amount)
    confidence = validate_confidence(confidence)
    tier = tier_of(emotion)

    a_factor = amount_factor(value, settings)
    e_factor = emotion_risk_factor(emotion, settings)
    threshold = settings.base_threshold * a_factor * e_factor
    held = should_hold(emotion, value, confidence, settings)

    lines = []

    if held:
        lines.append("Decision: HOLD FOR REVIEW")
    else:
        lines.append("Decision: PROCEED")

    lines.append(f"Emotion: {emotion.value} ({tier.value} tier), confidence {confidence:.2f}")
    lines.append(
        f"Threshold: {settings.base_threshold:.2f} x {a_factor:.2f} (amount ${value:,.2f})"
        f" x {e_factor:.2f} (emotion) = {threshold:.3f}"
    )

    if tier != Tier.RISKY:
        lines.append(f"  - {tier.value.capitalize()} emotions are never held automatically")
    elif held:
        lines.append(f"  - Confidence {confidence:.2f} exceeds threshold {threshold:.3f}")
    else:
        lines.append(f"  - Confidence {confidence:.2f} does not exceed threshold {threshold:.3f}")

    return "\n".join(lines)
