"""Advisor service - chat replies shaped by the current emotion."""

import structlog

from moodguard.core.metrics import record_advisor_reply
from moodguard.domain.interfaces import EmotionRepository
from moodguard.application.dto import AdvisorReplyResponse
from moodguard.service.emotion import advisor_reply, tier_of

logger = structlog.get_logger(__name__)


class AdvisorService:
    """
    Application service for the advisor chat.

    Replies always use the session's current emotion; the chat never
    changes the emotion state.
    """

    def __init__(self, emotion_repository: EmotionRepository):
        self._emotion_repo = emotion_repository

    async def reply(self, message: str) -> AdvisorReplyResponse:
        """
        Answer a chat message.

        Raises:
            InvalidArgumentException: If the message is empty
        """
        state = await self._emotion_repo.get_state()
        emotion = state.current_emotion

        topic, reply = advisor_reply(message, emotion)
        record_advisor_reply(topic.value)
        logger.info("advisor_replied", topic=topic.value, emotion=emotion.value)

        return AdvisorReplyResponse(
            message=message,
            reply=reply,
            topic=topic.value,
            emotion=emotion.value,
            tier=tier_of(emotion).value,
        )
