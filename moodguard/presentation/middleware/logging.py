"""Access logging and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from moodguard.core.config import settings
from moodguard.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

# Scraped or polled often enough to drown out real traffic in the logs
QUIET_PATHS = frozenset({"/metrics", "/v1/health"})


def _route_template(request: Request) -> str:
    """Matched route path, e.g. ``/v1/transactions/pending/{transaction_id}/approve``."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request with status and duration.

    Client errors log at warning level and unhandled exceptions at error
    level. Request metrics are labelled by route template so path
    parameters don't create new series.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as exc:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
            )
            raise
        finally:
            duration = time.perf_counter() - start
            if settings.metrics_enabled:
                record_http_request(request.method, _route_template(request), status_code, duration)

            if request.url.path not in QUIET_PATHS:
                log = logger.warning if status_code >= 400 else logger.info
                log(
                    "request_completed",
                    method=request.method,
                    path=request.url.path,
                    query=str(request.query_params) or None,
                    status_code=status_code,
                    duration_ms=round(duration * 1000, 2),
                )
