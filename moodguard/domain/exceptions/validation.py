"""Input validation exceptions raised at the evaluator boundary."""

from typing import Any

from .base import DomainException


class InvalidEmotionException(DomainException):
    """Raised when a value is not one of the known emotion labels."""

    code = "INVALID_EMOTION"

    def __init__(self, value: Any):
        super().__init__(
            message=f"Invalid emotion: {value!r}",
            details={"value": repr(value)},
        )
        self.value = value


class InvalidArgumentException(DomainException):
    """Raised when an amount, confidence or other input is out of range."""

    code = "INVALID_ARGUMENT"

    def __init__(self, message: str):
        super().__init__(message=message)
