"""Domain Interfaces - Abstract contracts for infrastructure."""

from .repositories import FinanceRepository, EmotionRepository, PlanningRepository
from .detectors import EmotionDetector

__all__ = [
    "FinanceRepository",
    "EmotionRepository",
    "PlanningRepository",
    "EmotionDetector",
]
