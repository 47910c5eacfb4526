# tests/conftest.py
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone

from apps.goals.models import Goal
from apps.meetings.models import Meeting
from apps.projects.models import Project
from apps.reminders.models import Reminder
from apps.tasks.models import Task

FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture()
def make_project(db):
    def factory(**overrides) -> Project:
        values = {
            'name': 'Website redesign',
            'project_manager': 'Alice',
            'start_date': timezone.now() - timedelta(days=10),
        }
        values.update(overrides)
        return Project.objects.create(**values)
    return factory


@pytest.fixture()
def make_task(db):
    def factory(**overrides) -> Task:
        values = {
            'title': 'Write copy',
            'assigned_by': 'Alice',
            'assigned_to': 'Bob',
        }
        values.update(overrides)
        return Task.objects.create(**values)
    return factory


@pytest.fixture()
def make_meeting(db):
    def factory(**overrides) -> Meeting:
        values = {
            'title': 'Standup',
            'meeting_date': timezone.now(),
            'start_time': '09:30',
            'end_time': '09:45',
            'duration': 15,
            'organizer': 'Carol Smith',
        }
        values.update(overrides)
        return Meeting.objects.create(**values)
    return factory


@pytest.fixture()
def make_reminder(db):
    def factory(**overrides) -> Reminder:
        values = {
            'title': 'Pay invoice',
            'reminder_date': timezone.now(),
            'reminder_time': '08:00',
        }
        values.update(overrides)
        return Reminder.objects.create(**values)
    return factory


@pytest.fixture()
def make_goal(db):
    def factory(**overrides) -> Goal:
        values = {
            'title': 'Read books',
            'target_value': 12,
            'start_date': timezone.now() - timedelta(days=30),
            'target_date': timezone.now() + timedelta(days=300),
        }
        values.update(overrides)
        return Goal.objects.create(**values)
    return factory
