"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from moodguard.domain.interfaces import (
    EmotionDetector,
    EmotionRepository,
    FinanceRepository,
    PlanningRepository,
)
from moodguard.infrastructure.detectors import MockEmotionDetector
from moodguard.infrastructure.repositories import (
    InMemoryEmotionRepository,
    InMemoryFinanceRepository,
    InMemoryPlanningRepository,
)
from moodguard.application.services import (
    AdvisorService,
    DebtService,
    EmotionService,
    InsightService,
    SavingsService,
    TransactionService,
)


# Repository dependencies (one session per process)
@lru_cache
def get_finance_repository() -> FinanceRepository:
    """Get the session FinanceRepository instance."""
    return InMemoryFinanceRepository()


@lru_cache
def get_emotion_repository() -> EmotionRepository:
    """Get the session EmotionRepository instance."""
    return InMemoryEmotionRepository()


@lru_cache
def get_planning_repository() -> PlanningRepository:
    """Get the session PlanningRepository instance."""
    return InMemoryPlanningRepository()


# External provider dependencies
def get_emotion_detector() -> EmotionDetector:
    """Get an EmotionDetector instance."""
    return MockEmotionDetector()


# Service dependencies
def get_emotion_service(
    emotion_repo: Annotated[EmotionRepository, Depends(get_emotion_repository)],
    detector: Annotated[EmotionDetector, Depends(get_emotion_detector)],
) -> EmotionService:
    """Get an EmotionService instance."""
    return EmotionService(emotion_repository=emotion_repo, detector=detector)


def get_transaction_service(
    finance_repo: Annotated[FinanceRepository, Depends(get_finance_repository)],
    emotion_repo: Annotated[EmotionRepository, Depends(get_emotion_repository)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        finance_repository=finance_repo,
        emotion_repository=emotion_repo,
    )


def get_insight_service(
    finance_repo: Annotated[FinanceRepository, Depends(get_finance_repository)],
) -> InsightService:
    """Get an InsightService instance."""
    return InsightService(finance_repository=finance_repo)


def get_debt_service(
    planning_repo: Annotated[PlanningRepository, Depends(get_planning_repository)],
) -> DebtService:
    return DebtService(planning_repository=planning_repo)


def get_savings_service(
    planning_repo: Annotated[PlanningRepository, Depends(get_planning_repository)],
) -> SavingsService:
    return SavingsService(planning_repository=planning_repo)


def get_advisor_service(
    emotion_repo: Annotated[EmotionRepository, Depends(get_emotion_repository)],
) -> AdvisorService:
    """Get an AdvisorService bound to the session emotion state."""
    return AdvisorService(emotion_repository=emotion_repo)
