# apps/meetings/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from apps.core.domain.entities import Priority, ProjectRef


class MeetingStatus(str, Enum):
    SCHEDULED = 'scheduled'
    ONGOING = 'ongoing'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class MeetingType(str, Enum):
    IN_PERSON = 'in-person'
    VIDEO_CALL = 'video-call'
    PHONE_CALL = 'phone-call'


class ParticipantStatus(str, Enum):
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    DECLINED = 'declined'
    MAYBE = 'maybe'


@dataclass
class MeetingEntity:
    id: Optional[int]
    title: str
    description: str = ""

    meeting_date: Optional[datetime] = None
    start_time: str = ""  # HH:MM
    end_time: str = ""    # HH:MM
    # Podawane przez klienta; backend nie liczy go ze start/end
    duration: int = 0

    location: str = ""
    meeting_type: MeetingType = MeetingType.IN_PERSON
    meeting_link: str = ""
    organizer: str = ""
    participants: List[Dict[str, Any]] = field(default_factory=list)  # [{name, email, status}]
    agenda: str = ""
    status: MeetingStatus = MeetingStatus.SCHEDULED
    priority: Priority = Priority.MEDIUM
    project: Optional[ProjectRef] = None
    notes: str = ""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
