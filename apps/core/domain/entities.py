# apps/core/domain/entities.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Priority(str, Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


def choices_of(enum_cls) -> List[Tuple[str, str]]:
    """Enum domenowy -> choices dla pól Django (wartość == etykieta, jak w API)."""
    return [(member.value, member.value) for member in enum_cls]


@dataclass
class ProjectRef:
    """Skrócony projekt dołączany do zadań i spotkań (`{_id, name}`)."""
    id: int
    name: str
