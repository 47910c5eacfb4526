# apps/reminders/domain/entities.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from apps.core.domain.entities import Priority


class ReminderStatus(str, Enum):
    PENDING = 'pending'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class ReminderCategory(str, Enum):
    PERSONAL = 'personal'
    WORK = 'work'
    MEETING = 'meeting'
    DEADLINE = 'deadline'
    OTHER = 'other'


class RecurringType(str, Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'


@dataclass
class ReminderEntity:
    id: Optional[int]
    title: str
    description: str = ""

    reminder_date: Optional[datetime] = None
    reminder_time: str = ""  # HH:MM

    status: ReminderStatus = ReminderStatus.PENDING
    priority: Priority = Priority.MEDIUM
    category: ReminderCategory = ReminderCategory.PERSONAL

    is_recurring: bool = False
    recurring_type: Optional[RecurringType] = None
    # Zapisywane, ale backend nie wysyła powiadomień
    notification_sent: bool = False

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
