# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from apps.core.domain.entities import Priority


class GoalStatus(str, Enum):
    ACTIVE = 'active'
    COMPLETED = 'completed'
    PAUSED = 'paused'
    CANCELLED = 'cancelled'


class GoalCategory(str, Enum):
    PERSONAL = 'personal'
    WORK = 'work'
    HEALTH = 'health'
    LEARNING = 'learning'
    FINANCIAL = 'financial'
    OTHER = 'other'


@dataclass
class GoalEntity:
    id: Optional[int]
    title: str
    description: str = ""

    target_value: float = 0
    current_value: float = 0
    unit: str = "units"

    category: GoalCategory = GoalCategory.WORK
    priority: Priority = Priority.MEDIUM
    status: GoalStatus = GoalStatus.ACTIVE

    start_date: Optional[datetime] = None
    target_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None

    color: str = "#10b981"
    tags: List[str] = field(default_factory=list)
    milestones: List[Dict[str, Any]] = field(default_factory=list)  # [{title, targetValue, achievedDate, isAchieved}]

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_completed(self) -> bool:
        return self.status == GoalStatus.COMPLETED

    def reaches_target(self, value: float) -> bool:
        return value >= self.target_value
