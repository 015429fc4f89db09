"""Per-request id propagation."""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Caller-supplied ids are echoed into logs and headers, so keep them tame
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def new_request_id() -> str:
    return uuid.uuid4().hex[:16]


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Assigns each request an id and binds it to the structlog context.

    A well-formed ``X-Request-ID`` from the caller is reused; anything else
    is replaced with a fresh id. The id is returned in the response header.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next):
        incoming = request.headers.get(self.HEADER_NAME, "")
        request_id = incoming if _VALID_REQUEST_ID.match(incoming) else new_request_id()

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)

        response.headers[self.HEADER_NAME] = request_id
        return response
