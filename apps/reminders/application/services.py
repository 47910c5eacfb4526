# apps/reminders/application/services.py
from datetime import timedelta
from typing import Any, Dict, List

from django.conf import settings
from django.utils import timezone

from apps.core.application.services import EntityService
from apps.core.domain.querying import day_bounds
from apps.reminders.ports.repositories import IReminderRepository


class ReminderService(EntityService):
    total_key = 'totalReminders'
    repository: IReminderRepository

    def stats(self) -> Dict[str, Any]:
        summary = super().stats()
        today = day_bounds(timezone.localdate(self.clock()))
        summary['todayReminders'] = self.repository.count_between(*today)
        return summary

    def upcoming(self) -> List[Dict[str, Any]]:
        """Oczekujące przypomnienia na najbliższe dni (domyślnie 7)."""
        now = self.clock()
        days = settings.WORKBOARD.get('UPCOMING_DAYS', 7)
        reminders = self.repository.list_pending_between(now, now + timedelta(days=days))
        return [self.to_record(r) for r in reminders]
