"""Financial insight entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from .emotion import Emotion


class ImpactLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class FinancialInsight:
    """A short observation about the user's finances shown on the dashboard."""

    title: str
    description: str
    impact_level: ImpactLevel
    emotion_related: bool = False
    emotion: Optional[Emotion] = None
    id: str = field(default_factory=lambda: f"insight-{uuid4().hex[:12]}")
    date: datetime = field(default_factory=datetime.utcnow)
