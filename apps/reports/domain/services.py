# apps/reports/domain/services.py
from datetime import timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional

from django.conf import settings
from django.db.models import Count, Q, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.core.adapters.orm_repositories import storage_errors
from apps.core.domain.errors import FieldError, ValidationFailure
from apps.core.domain.querying import day_bounds, start_of_day
from apps.meetings.models import Meeting
from apps.projects.domain.entities import ProjectStatus
from apps.projects.models import Project
from apps.reminders.domain.entities import ReminderStatus
from apps.reminders.models import Reminder
from apps.tasks.domain.entities import TaskStatus
from apps.tasks.models import Task

SECONDS_PER_DAY = 60 * 60 * 24


def _breakdown(model) -> List[Dict[str, Any]]:
    rows = model.objects.values('status').annotate(count=Count('id')).order_by()
    return [{'_id': row['status'], 'count': row['count']} for row in rows]


def parse_period(params: Mapping[str, Any], default: int) -> int:
    raw = params.get('period')
    if raw in (None, ''):
        return default
    try:
        period = int(raw)
    except (TypeError, ValueError):
        raise ValidationFailure([FieldError('period', 'period must be an integer')])
    if period < 1:
        raise ValidationFailure([FieldError('period', 'period must be at least 1')])
    return period


class ReportService:
    """Dane do wykresów dashboardu (tylko odczyt, agregacje ORM)."""

    def __init__(self, clock: Callable = timezone.now):
        self.clock = clock
        self.options = settings.WORKBOARD

    def _task_analytics(self, since) -> List[Dict[str, Any]]:
        # Jeden wiersz na dzień utworzenia (dni bez zadań pomijamy)
        rows = (
            Task.objects.filter(created_at__gte=since)
            .annotate(day=TruncDate('created_at'))
            .values('day')
            .annotate(
                completed=Count('id', filter=Q(status=TaskStatus.COMPLETED.value)),
                inProgress=Count('id', filter=Q(status=TaskStatus.IN_PROGRESS.value)),
                new=Count('id', filter=Q(status=TaskStatus.NEW.value)),
                closed=Count('id', filter=Q(status=TaskStatus.CLOSED.value)),
            )
            .order_by('day')
        )
        return [
            {
                '_id': row['day'].isoformat(),
                'completed': row['completed'],
                'inProgress': row['inProgress'],
                'new': row['new'],
                'closed': row['closed'],
            }
            for row in rows
        ]

    def _goals_data(self) -> List[Dict[str, Any]]:
        limit = self.options.get('DASHBOARD_PROJECTS_LIMIT', 6)
        projects = (
            Project.objects
            .filter(status__in=[ProjectStatus.ACTIVE.value, ProjectStatus.PLANNING.value])
            .order_by('-created_at', '-id')
            .values('id', 'name', 'progress', 'status', 'priority')[:limit]
        )
        return [
            {
                '_id': p['id'],
                'name': p['name'],
                'progress': p['progress'],
                'status': p['status'],
                'priority': p['priority'],
            }
            for p in projects
        ]

    def get_dashboard(self) -> Dict[str, Any]:
        """Zbiorcze dane strony głównej."""
        window = self.options.get('DASHBOARD_WINDOW_DAYS', 30)
        today = timezone.localdate(self.clock())
        # Dziś plus pełne `window` dni wstecz, od północy czasu lokalnego
        since = start_of_day(today - timedelta(days=window))
        day_start, day_end = day_bounds(today)

        with storage_errors('Dashboard'):
            return {
                'taskAnalytics': self._task_analytics(since),
                'taskStats': _breakdown(Task),
                'projectStats': _breakdown(Project),
                'goalsData': self._goals_data(),
                'todayMeetings': Meeting.objects.filter(
                    meeting_date__gte=day_start, meeting_date__lt=day_end
                ).count(),
                'pendingReminders': Reminder.objects.filter(status=ReminderStatus.PENDING.value).count(),
            }

    def get_productivity(self, period: Optional[int] = None) -> Dict[str, Any]:
        """
        Ukończone zadania z ostatnich `period` dni, grupowane po dniu updated_at,
        oraz średni czas od utworzenia do ostatniej zmiany (w dniach).
        """
        if period is None:
            period = self.options.get('PRODUCTIVITY_WINDOW_DAYS', 7)
        since = self.clock() - timedelta(days=period)

        with storage_errors('Productivity'):
            completed = Task.objects.filter(status=TaskStatus.COMPLETED.value, updated_at__gte=since)
            rows = (
                completed
                .annotate(day=TruncDate('updated_at'))
                .values('day')
                .annotate(completedTasks=Count('id'), totalProgress=Sum('progress'))
                .order_by('day')
            )
            productivity = [
                {
                    '_id': row['day'].isoformat(),
                    'completedTasks': row['completedTasks'],
                    'totalProgress': row['totalProgress'] or 0,
                }
                for row in rows
            ]
            spans = [
                (updated - created).total_seconds() / SECONDS_PER_DAY
                for created, updated in completed.values_list('created_at', 'updated_at')
            ]

        return {
            'productivityData': productivity,
            'averageCompletionTime': sum(spans) / len(spans) if spans else 0,
        }
