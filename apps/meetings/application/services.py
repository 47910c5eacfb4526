# apps/meetings/application/services.py
from datetime import timedelta
from typing import Any, Dict, List

from django.conf import settings
from django.utils import timezone

from apps.core.application.services import EntityService
from apps.core.domain.querying import day_bounds
from apps.meetings.domain.entities import MeetingStatus
from apps.meetings.ports.repositories import IMeetingRepository


class MeetingService(EntityService):
    total_key = 'totalMeetings'
    repository: IMeetingRepository

    def _today(self):
        return day_bounds(timezone.localdate(self.clock()))

    def stats(self) -> Dict[str, Any]:
        summary = super().stats()
        summary['todayMeetings'] = self.repository.count_between(*self._today())
        return summary

    def today(self) -> List[Dict[str, Any]]:
        """Dzisiejsze spotkania, które jeszcze się odbywają lub odbędą."""
        start, end = self._today()
        meetings = self.repository.list_between(
            start, end, [MeetingStatus.SCHEDULED.value, MeetingStatus.ONGOING.value]
        )
        return [self.to_record(m) for m in meetings]

    def upcoming(self) -> List[Dict[str, Any]]:
        options = settings.WORKBOARD
        now = self.clock()
        meetings = self.repository.list_between(
            now,
            now + timedelta(days=options.get('UPCOMING_DAYS', 7)),
            [MeetingStatus.SCHEDULED.value],
            limit=options.get('UPCOMING_MEETINGS_LIMIT', 10),
        )
        return [self.to_record(m) for m in meetings]
