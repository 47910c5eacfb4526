# apps/reminders/adapters/orm_repositories.py
from datetime import datetime
from typing import List

from apps.core.adapters.orm_repositories import DjangoEntityRepository, storage_errors
from apps.reminders.domain.entities import ReminderEntity, ReminderStatus
from apps.reminders.filters import ReminderFilter
from apps.reminders.forms import ReminderForm
from apps.reminders.models import Reminder
from apps.reminders.ports.repositories import IReminderRepository


class DjangoReminderRepository(DjangoEntityRepository, IReminderRepository):
    model = Reminder
    entity_class = ReminderEntity
    form_class = ReminderForm
    filterset_class = ReminderFilter
    ordering = ('reminder_date', 'reminder_time', 'id')

    def count_between(self, start: datetime, end: datetime) -> int:
        return self.count(reminder_date__gte=start, reminder_date__lt=end)

    def list_pending_between(self, start: datetime, end: datetime) -> List[ReminderEntity]:
        with storage_errors(self.entity_name):
            qs = Reminder.objects.filter(
                status=ReminderStatus.PENDING.value,
                reminder_date__gte=start,
                reminder_date__lt=end,
            ).order_by(*self.ordering)
            return [self.to_entity(r) for r in qs]
