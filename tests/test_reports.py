# tests/test_reports.py
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.core.domain.errors import ValidationFailure
from apps.core.domain.querying import start_of_day
from apps.reports.domain.services import ReportService, parse_period
from apps.tasks.models import Task

pytestmark = pytest.mark.django_db


def backdate(task, **fields):
    Task.objects.filter(pk=task.pk).update(**fields)


class TestDashboard:
    def test_empty_store(self):
        data = ReportService().get_dashboard()

        assert data == {
            'taskAnalytics': [],
            'taskStats': [],
            'projectStats': [],
            'goalsData': [],
            'todayMeetings': 0,
            'pendingReminders': 0,
        }

    def test_task_analytics_per_day(self, make_task):
        now = timezone.now()
        make_task(status='new')
        make_task(status='inprogress')
        make_task(status='completed')
        old = make_task(status='closed')
        backdate(old, created_at=now - timedelta(days=3))
        ancient = make_task(status='new')
        backdate(ancient, created_at=now - timedelta(days=45))

        analytics = ReportService().get_dashboard()['taskAnalytics']

        three_days_ago = timezone.localdate(now - timedelta(days=3)).isoformat()
        today = timezone.localdate(now).isoformat()
        assert analytics == [
            {'_id': three_days_ago, 'completed': 0, 'inProgress': 0, 'new': 0, 'closed': 1},
            {'_id': today, 'completed': 1, 'inProgress': 1, 'new': 1, 'closed': 0},
        ]

    def test_window_starts_at_local_midnight_thirty_days_back(self, make_task):
        since = start_of_day(timezone.localdate() - timedelta(days=30))
        edge = make_task(status='new')
        backdate(edge, created_at=since)
        outside = make_task(status='new')
        backdate(outside, created_at=since - timedelta(seconds=1))

        analytics = ReportService().get_dashboard()['taskAnalytics']

        assert analytics == [
            {'_id': since.date().isoformat(), 'completed': 0, 'inProgress': 0, 'new': 1, 'closed': 0},
        ]

    def test_goals_data_lists_open_projects(self, make_project, settings):
        settings.WORKBOARD = {**settings.WORKBOARD, 'DASHBOARD_PROJECTS_LIMIT': 2}
        for status in ('active', 'planning', 'active', 'completed'):
            make_project(status=status)

        goals = ReportService().get_dashboard()['goalsData']

        assert len(goals) == 2
        assert set(goals[0]) == {'_id', 'name', 'progress', 'status', 'priority'}
        assert all(g['status'] in ('active', 'planning') for g in goals)

    def test_counters(self, make_meeting, make_reminder):
        make_meeting(meeting_date=timezone.now())
        make_meeting(meeting_date=timezone.now() + timedelta(days=2))
        make_reminder(status='pending')
        make_reminder(status='completed')

        data = ReportService().get_dashboard()

        assert data['todayMeetings'] == 1
        assert data['pendingReminders'] == 1


class TestProductivity:
    def test_completed_tasks_grouped_by_day(self, make_task):
        now = timezone.now()
        first = make_task(status='completed', progress=100)
        backdate(first, created_at=now - timedelta(days=5), updated_at=now - timedelta(days=2))
        second = make_task(status='completed', progress=90)
        backdate(second, created_at=now - timedelta(days=3), updated_at=now - timedelta(days=2))
        stale = make_task(status='completed', progress=100)
        backdate(stale, created_at=now - timedelta(days=20), updated_at=now - timedelta(days=10))
        make_task(status='inprogress')

        data = ReportService().get_productivity(7)

        day = timezone.localdate(now - timedelta(days=2)).isoformat()
        assert data['productivityData'] == [{'_id': day, 'completedTasks': 2, 'totalProgress': 190}]
        assert data['averageCompletionTime'] == pytest.approx(2.0)

    def test_no_completed_tasks(self):
        data = ReportService().get_productivity()
        assert data == {'productivityData': [], 'averageCompletionTime': 0}


@pytest.mark.parametrize("params, expected", [({}, 7), ({'period': '30'}, 30)])
def test_parse_period(params, expected):
    assert parse_period(params, 7) == expected


@pytest.mark.parametrize("raw", ['abc', '0', '-2'])
def test_parse_period_rejects_invalid(raw):
    with pytest.raises(ValidationFailure) as exc:
        parse_period({'period': raw}, 7)
    assert exc.value.errors[0].field == 'period'
