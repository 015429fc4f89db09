"""Base class for MoodGuard errors."""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for evaluator and workflow errors.

    ``code`` is the stable identifier returned to API callers; ``details``
    carries the offending values so clients don't have to parse ``message``.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(message)
