"""Exception handlers mapping MoodGuard errors to HTTP responses."""

from typing import Any, Dict, Optional, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from moodguard.domain.exceptions import (
    DomainException,
    InvalidEmotionException,
    InvalidArgumentException,
    PendingTransactionNotFoundException,
    AccountNotFoundException,
    EmotionDetectionDisabledException,
    EmotionDetectionTimeoutException,
    DebtNotFoundException,
    SavingsGoalNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

# Domain errors whose response needs nothing beyond the status code
STATUS_BY_EXCEPTION: Dict[Type[DomainException], int] = {
    InvalidEmotionException: 422,
    InvalidArgumentException: 422,
    PendingTransactionNotFoundException: 404,
    AccountNotFoundException: 404,
    DebtNotFoundException: 404,
    SavingsGoalNotFoundException: 404,
    EmotionDetectionDisabledException: 409,
}

DETECTION_UNAVAILABLE_MESSAGE = "Emotion detection temporarily unavailable. Please try again."


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {
        "error": code,
        "message": message,
        "request_id": get_request_id(),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Every error response uses the ``ErrorResponseSchema`` envelope.
    """

    async def mapped_domain_handler(request: Request, exc: DomainException) -> JSONResponse:
        status_code = STATUS_BY_EXCEPTION[type(exc)]
        logger.info(
            "request_rejected",
            code=exc.code,
            status_code=status_code,
            path=request.url.path,
        )
        return _error_response(status_code, exc.code, exc.message, exc.details)

    for exc_class in STATUS_BY_EXCEPTION:
        app.add_exception_handler(exc_class, mapped_domain_handler)

    @app.exception_handler(EmotionDetectionTimeoutException)
    async def detection_timeout_handler(
        request: Request,
        exc: EmotionDetectionTimeoutException,
    ) -> JSONResponse:
        """Provider timeouts surface as 503 with a retry hint."""
        logger.error("emotion_detection_unavailable", timeout=exc.timeout_seconds)
        return _error_response(503, exc.code, DETECTION_UNAVAILABLE_MESSAGE, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        fields = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        return _error_response(
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            {"fields": fields},
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning("domain_exception", code=exc.code, message=exc.message)
        return _error_response(400, exc.code, exc.message, exc.details)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
