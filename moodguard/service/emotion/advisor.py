"""
Rule-based replies for the financial advisor chat.

A message is routed to a topic by keyword, checked in this order:
    1. invest, stock           -> INVEST
    2. spend, buy, purchase    -> SPEND
    3. save, budget            -> SAVE
    4. anything else           -> GENERAL

Keywords match anywhere in the lower-cased message, so "investing" and
"savings" count. The reply is then phrased around the user's emotion; for
investment questions the tier decides whether now is a good time.
"""

from enum import Enum
from typing import Any, Sequence, Tuple

from moodguard.domain.entities import Emotion
from moodguard.domain.exceptions import InvalidArgumentException
from .advice import advice_for, is_good_time_to_invest
from .classifier import coerce_emotion, emotion_icon


class AdvisorTopic(str, Enum):
    INVEST = "invest"
    SPEND = "spend"
    SAVE = "save"
    GENERAL = "general"


TOPIC_KEYWORDS: Sequence[Tuple[AdvisorTopic, Tuple[str, ...]]] = (
    (AdvisorTopic.INVEST, ("invest", "stock")),
    (AdvisorTopic.SPEND, ("spend", "buy", "purchase")),
    (AdvisorTopic.SAVE, ("save", "budget")),
)

RECOMMENDED_SAVINGS_RATE = 15

EXCITED_SPENDING_EMOTIONS = frozenset({Emotion.HAPPY, Emotion.EXCITED})


def classify_topic(message: str) -> AdvisorTopic:
    """
    Route a chat message to a topic.

    Raises:
        InvalidArgumentException: If the message is empty or not text
    """
    if not isinstance(message, str) or not message.strip():
        raise InvalidArgumentException("message cannot be empty")

    text = message.lower()
    for topic, keywords in TOPIC_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return topic
    return AdvisorTopic.GENERAL


def _invest_reply(emotion: Emotion, icon: str) -> str:
    timing = "be" if is_good_time_to_invest(emotion) else "not be"
    reply = (
        f"I notice you're feeling {emotion.value} today. Based on your emotional "
        f"state, now might {timing} a good time to make investment decisions. {icon}"
    )
    if emotion == Emotion.ANXIOUS:
        reply += (
            " Consider waiting until you feel more balanced, or focus on "
            "lower-risk investments for now."
        )
    return reply


def _spend_reply(emotion: Emotion, icon: str) -> str:
    if emotion in EXCITED_SPENDING_EMOTIONS:
        pattern = "impulsive purchases when excited"
    else:
        pattern = "comfort purchases when feeling down"
    return (
        f"Before making a purchase, I'd like to note that you're feeling "
        f"{emotion.value} today. {icon} People often make {pattern}. Would you "
        f"like to set a 24-hour waiting period for this purchase?"
    )


def _save_reply(emotion: Emotion, icon: str) -> str:
    return (
        f"That's a great topic to discuss! Your emotional state ({emotion.value}) "
        f"{icon} is actually ideal for planning and budgeting. Based on your recent "
        f"spending patterns, I recommend setting aside {RECOMMENDED_SAVINGS_RATE}% "
        f"of your income for savings. Would you like me to suggest a detailed "
        f"savings plan?"
    )


def _general_reply(emotion: Emotion, icon: str) -> str:
    return (
        f"Thanks for your message. I notice you're feeling {emotion.value} today "
        f"{icon}. {advice_for(emotion)} How can I help you with your financial "
        f"decisions today?"
    )


_REPLIES = {
    AdvisorTopic.INVEST: _invest_reply,
    AdvisorTopic.SPEND: _spend_reply,
    AdvisorTopic.SAVE: _save_reply,
    AdvisorTopic.GENERAL: _general_reply,
}


def advisor_reply(message: str, emotion: Any) -> Tuple[AdvisorTopic, str]:
    """
    Generate the advisor's reply to a chat message.

    Args:
        message: The user's message
        emotion: The user's current emotion (Emotion or label)

    Returns:
        The detected topic and the reply text

    Raises:
        InvalidArgumentException: If the message is empty
        InvalidEmotionException: If the emotion is unknown
    """
    topic = classify_topic(message)
    resolved = coerce_emotion(emotion)
    return topic, _REPLIES[topic](resolved, emotion_icon(resolved))
