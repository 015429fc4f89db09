"""
Emotion-Aware Risk Module for the MoodGuard engine
"""

from .settings import EmotionSettings, emotion_settings
from .classifier import (
    RISKY_EMOTIONS,
    CAUTIOUS_EMOTIONS,
    BALANCED_EMOTIONS,
    coerce_emotion,
    tier_of,
    is_risky,
    is_cautious,
    is_balanced,
    emotion_label,
    emotion_icon,
)
from .advice import advice_for, is_good_time_to_invest
from .advisor import AdvisorTopic, classify_topic, advisor_reply
from .risk import (
    to_amount,
    validate_confidence,
    amount_factor,
    emotion_risk_factor,
    hold_threshold,
    should_hold,
    explain_hold,
)
from .spending import (
    format_currency,
    total_balance,
    total_by_type,
    spending_by_category,
    spending_by_emotion,
    average_spending,
    is_impulse_purchase,
)

__all__ = [
    # Settings
    "EmotionSettings",
    "emotion_settings",
    # Classifier
    "RISKY_EMOTIONS",
    "CAUTIOUS_EMOTIONS",
    "BALANCED_EMOTIONS",
    "coerce_emotion",
    "tier_of",
    "is_risky",
    "is_cautious",
    "is_balanced",
    "emotion_label",
    "emotion_icon",
    # Advice
    "advice_for",
    "is_good_time_to_invest",
    # Advisor
    "AdvisorTopic",
    "classify_topic",
    "advisor_reply",
    # Risk Evaluator
    "to_amount",
    "validate_confidence",
    "amount_factor",
    "emotion_risk_factor",
    "hold_threshold",
    "should_hold",
    "explain_hold",
    # Spending
    "format_currency",
    "total_balance",
    "total_by_type",
    "spending_by_category",
    "spending_by_emotion",
    "average_spending",
    "is_impulse_purchase",
]
