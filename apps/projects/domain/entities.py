# apps/projects/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from apps.core.domain.entities import Priority


class ProjectStatus(str, Enum):
    PLANNING = 'planning'
    ACTIVE = 'active'
    ON_HOLD = 'on-hold'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class MilestoneStatus(str, Enum):
    PENDING = 'pending'
    COMPLETED = 'completed'
    OVERDUE = 'overdue'


@dataclass
class MilestoneEntity:
    id: Optional[int]
    title: str
    description: str = ""
    due_date: Optional[datetime] = None
    status: MilestoneStatus = MilestoneStatus.PENDING
    completed_date: Optional[datetime] = None


@dataclass
class ProjectEntity:
    id: Optional[int]  # ID może być None przed zapisem
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = 0  # 0-100
    priority: Priority = Priority.MEDIUM

    # Terminy
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    expected_end_date: Optional[datetime] = None

    # Zagnieżdżone obiekty trzymamy w formacie API (camelCase)
    budget: Dict[str, Any] = field(default_factory=lambda: {'allocated': 0, 'spent': 0})
    team_members: List[Dict[str, Any]] = field(default_factory=list)
    project_manager: str = ""
    client: Optional[Dict[str, Any]] = None
    milestones: List[MilestoneEntity] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    documents: List[Dict[str, Any]] = field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
