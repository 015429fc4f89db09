"""Error envelope shared by every MoodGuard endpoint."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Body returned for every 4xx/5xx response."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "INVALID_EMOTION",
                    "message": "Invalid emotion: 'grumpy'",
                    "details": {"value": "'grumpy'"},
                    "request_id": "5b0d6e4f2c1a4e7b",
                }
            ]
        }
    )

    error: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["PENDING_TRANSACTION_NOT_FOUND"],
    )
    message: str
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Offending values or field errors, when available",
    )
    request_id: Optional[str] = Field(None, description="Echoes the X-Request-ID header")
