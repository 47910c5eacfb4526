# apps/tasks/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from apps.core.domain.entities import Priority, ProjectRef


class TaskStatus(str, Enum):
    NEW = 'new'
    IN_PROGRESS = 'inprogress'
    COMPLETED = 'completed'
    CLOSED = 'closed'


@dataclass
class TaskEntity:
    id: Optional[int]  # ID może być None przed zapisem
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.NEW
    priority: Priority = Priority.MEDIUM

    # Kto komu
    assigned_by: str = ""
    assigned_to: str = ""

    progress: int = 0  # 0-100
    due_date: Optional[datetime] = None

    # Relacja jako skrót {_id, name}, żeby nie wiązać encji z ORM
    project: Optional[ProjectRef] = None
    tags: List[str] = field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
