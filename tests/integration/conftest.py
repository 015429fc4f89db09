"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- Fresh in-memory finance, emotion and planning state per test
- Deterministic and slow emotion detectors
"""

import asyncio
from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from moodguard.main import app
from moodguard.application.services import EmotionService
from moodguard.core.dependencies import (
    get_emotion_detector,
    get_emotion_repository,
    get_emotion_service,
    get_finance_repository,
    get_planning_repository,
)
from moodguard.domain.entities import Emotion, EmotionReading
from moodguard.domain.interfaces import EmotionDetector
from moodguard.infrastructure.repositories import (
    InMemoryEmotionRepository,
    InMemoryFinanceRepository,
    InMemoryPlanningRepository,
)


# =============================================================================
# Mock Detectors
# =============================================================================

class ScriptedEmotionDetector(EmotionDetector):
    """Detector that replays a fixed sequence of readings."""

    def __init__(self, readings: List[EmotionReading] | None = None):
        self.readings = readings or [EmotionReading(emotion=Emotion.ANGRY, confidence=0.9)]
        self.call_count = 0

    async def detect(self) -> EmotionReading:
        reading = self.readings[self.call_count % len(self.readings)]
        self.call_count += 1
        return EmotionReading(emotion=reading.emotion, confidence=reading.confidence)


class SlowEmotionDetector(EmotionDetector):
    """Detector that never answers within the test timeout."""

    def __init__(self, delay: float = 1.0):
        self.delay = delay

    async def detect(self) -> EmotionReading:
        await asyncio.sleep(self.delay)
        return EmotionReading(emotion=Emotion.NEUTRAL, confidence=0.8)


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def finance_repository() -> InMemoryFinanceRepository:
    """Fresh finance state with the default seeded accounts and budgets."""
    return InMemoryFinanceRepository()


@pytest.fixture
def emotion_repository() -> InMemoryEmotionRepository:
    """Fresh emotion state (neutral, 0.8, detection on)."""
    return InMemoryEmotionRepository()


@pytest.fixture
def planning_repository() -> InMemoryPlanningRepository:
    """Fresh planning state with the default seeded debts and goals."""
    return InMemoryPlanningRepository()


@pytest.fixture
def scripted_detector() -> ScriptedEmotionDetector:
    return ScriptedEmotionDetector()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    finance_repository: InMemoryFinanceRepository,
    emotion_repository: InMemoryEmotionRepository,
    planning_repository: InMemoryPlanningRepository,
    scripted_detector: ScriptedEmotionDetector,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with isolated session state.

    This client:
    - Uses fresh in-memory repositories
    - Uses a scripted emotion detector (angry, 0.9)
    """
    app.dependency_overrides[get_finance_repository] = lambda: finance_repository
    app.dependency_overrides[get_emotion_repository] = lambda: emotion_repository
    app.dependency_overrides[get_planning_repository] = lambda: planning_repository
    app.dependency_overrides[get_emotion_detector] = lambda: scripted_detector

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_slow_detector(
    finance_repository: InMemoryFinanceRepository,
    emotion_repository: InMemoryEmotionRepository,
    planning_repository: InMemoryPlanningRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose detector always times out."""
    def override_get_emotion_service():
        return EmotionService(
            emotion_repository=emotion_repository,
            detector=SlowEmotionDetector(delay=1.0),
            detection_timeout=0.05,
        )

    app.dependency_overrides[get_finance_repository] = lambda: finance_repository
    app.dependency_overrides[get_emotion_repository] = lambda: emotion_repository
    app.dependency_overrides[get_planning_repository] = lambda: planning_repository
    app.dependency_overrides[get_emotion_service] = override_get_emotion_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Request Fixtures
# =============================================================================

@pytest.fixture
def angry_purchase_request() -> dict:
    """Large expense while angry with high confidence (held)."""
    return {
        "amount": 600,
        "category": "Shopping",
        "description": "Designer jacket",
        "type": "expense",
        "emotion": "angry",
        "emotion_confidence": 0.9,
    }


@pytest.fixture
def calm_purchase_request() -> dict:
    """Small expense while neutral (committed)."""
    return {
        "amount": 42.5,
        "category": "Food",
        "description": "Groceries",
        "type": "expense",
        "emotion": "neutral",
        "emotion_confidence": 0.99,
    }
