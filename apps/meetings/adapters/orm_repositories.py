# apps/meetings/adapters/orm_repositories.py
from datetime import datetime
from typing import List, Optional

from apps.core.adapters.orm_repositories import DjangoEntityRepository, project_ref, storage_errors
from apps.meetings.domain.entities import MeetingEntity
from apps.meetings.filters import MeetingFilter
from apps.meetings.forms import MeetingForm
from apps.meetings.models import Meeting
from apps.meetings.ports.repositories import IMeetingRepository


class DjangoMeetingRepository(DjangoEntityRepository, IMeetingRepository):
    model = Meeting
    entity_class = MeetingEntity
    form_class = MeetingForm
    filterset_class = MeetingFilter
    ordering = ('meeting_date', 'start_time', 'id')

    def queryset(self):
        return Meeting.objects.select_related('project')

    def entity_values(self, obj):
        values = super().entity_values(obj)
        values['project'] = project_ref(obj.project)
        return values

    def count_between(self, start: datetime, end: datetime) -> int:
        return self.count(meeting_date__gte=start, meeting_date__lt=end)

    def list_between(self, start: datetime, end: datetime, statuses: List[str],
                     limit: Optional[int] = None) -> List[MeetingEntity]:
        with storage_errors(self.entity_name):
            qs = self.queryset().filter(
                meeting_date__gte=start,
                meeting_date__lt=end,
                status__in=statuses,
            ).order_by(*self.ordering)
            if limit:
                qs = qs[:limit]
            return [self.to_entity(m) for m in qs]
