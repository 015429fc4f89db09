"""
MoodGuard Gateway application.

Builds the FastAPI app: middleware, exception handlers, the /v1 API and the
Prometheus scrape endpoint. ``run`` is the console-script entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from moodguard import __version__
from moodguard.core.config import Settings, settings
from moodguard.core.logging import setup_logging
from moodguard.core.metrics import get_metrics, get_metrics_content_type
from moodguard.presentation.api import api_router
from moodguard.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)
from moodguard.service.emotion import emotion_settings

OPENAPI_TAGS = [
    {"name": "Emotion", "description": "Current emotion, detection and advice"},
    {"name": "Transactions", "description": "Submit candidates and resolve held ones"},
    {"name": "Finance", "description": "Balances, budgets and insights"},
    {"name": "Debts", "description": "Debt tracker and payoff strategies"},
    {"name": "Savings", "description": "Savings goals, contributions and auto-save"},
    {"name": "Advisor", "description": "Emotion-aware advisor chat"},
    {"name": "Health", "description": "Liveness"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    logger = structlog.get_logger(__name__)
    logger.info(
        "moodguard_started",
        version=__version__,
        base_threshold=emotion_settings.base_threshold,
        detection_timeout=settings.detection_timeout_seconds,
    )
    yield
    logger.info("moodguard_stopped")


def create_app(config: Settings = settings) -> FastAPI:
    """Assemble the MoodGuard FastAPI application."""
    application = FastAPI(
        title="MoodGuard Gateway",
        description="Holds outgoing transactions made in a risky emotional state for review.",
        version=__version__,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    # Starlette runs the last-added middleware first
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(RequestContextMiddleware)

    error_handler_middleware(application)
    application.include_router(api_router)

    if config.metrics_enabled:
        @application.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @application.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return application


app = create_app()


def run() -> None:
    """Serve ``moodguard.main:app`` with uvicorn."""
    import uvicorn

    uvicorn.run(
        "moodguard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
