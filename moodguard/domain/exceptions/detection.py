"""Emotion detection provider exceptions."""

from .base import DomainException


class EmotionDetectionDisabledException(DomainException):
    """Raised when detection is requested while it is switched off."""

    code = "EMOTION_DETECTION_DISABLED"

    def __init__(self):
        super().__init__(message="Emotion detection is disabled")


class EmotionDetectionTimeoutException(DomainException):
    """Raised when the detection provider does not answer in time."""

    code = "EMOTION_DETECTION_TIMEOUT"

    def __init__(self, timeout_seconds: float):
        super().__init__(
            message=f"Emotion detection timed out after {timeout_seconds}s",
            details={"timeout_seconds": timeout_seconds},
        )
        self.timeout_seconds = timeout_seconds
