# apps/reminders/ports/repositories.py
from abc import abstractmethod
from datetime import datetime
from typing import List

from apps.core.ports.repositories import IEntityRepository
from apps.reminders.domain.entities import ReminderEntity


class IReminderRepository(IEntityRepository):
    entity_name = 'Reminder'

    @abstractmethod
    def count_between(self, start: datetime, end: datetime) -> int:
        """Liczba przypomnień z reminder_date w [start, end)."""
        pass

    @abstractmethod
    def list_pending_between(self, start: datetime, end: datetime) -> List[ReminderEntity]:
        pass
