# tests/test_derived.py
from datetime import datetime, timedelta, timezone as dt_timezone
from types import SimpleNamespace

import pytest

from apps.core.domain.derived import (
    ProjectHealth, average_progress, goal_is_overdue, goal_progress, project_health, round_half_up,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=dt_timezone.utc)


@pytest.mark.parametrize("value, expected", [(2.5, 3), (2.4, 2), (0.5, 1), (66.666, 67), (0, 0)])
def test_round_half_up_rounds_halves_up(value, expected):
    assert round_half_up(value) == expected


def test_goal_progress_is_percentage_of_target():
    assert goal_progress(50, 100) == 50
    assert goal_progress(2, 3) == 67


def test_goal_progress_caps_at_100():
    assert goal_progress(150, 100) == 100


def test_goal_progress_with_zero_target_is_zero():
    assert goal_progress(10, 0) == 0


def test_goal_is_overdue_after_target_date():
    assert goal_is_overdue('active', NOW - timedelta(days=1), NOW) is True
    assert goal_is_overdue('active', NOW + timedelta(days=1), NOW) is False


def test_completed_goal_is_never_overdue():
    assert goal_is_overdue('completed', NOW - timedelta(days=100), NOW) is False


class TestProjectHealth:
    start = NOW - timedelta(days=50)
    end = NOW + timedelta(days=50)  # połowa czasu minęła -> oczekiwane 50%

    def test_good_when_on_track(self):
        assert project_health(45, self.start, self.end, NOW) == ProjectHealth.GOOD

    def test_warning_between_70_and_90_percent_of_expected(self):
        assert project_health(40, self.start, self.end, NOW) == ProjectHealth.WARNING

    def test_critical_below_70_percent_of_expected(self):
        assert project_health(20, self.start, self.end, NOW) == ProjectHealth.CRITICAL

    def test_unknown_without_expected_end(self):
        assert project_health(20, self.start, None, NOW) == ProjectHealth.UNKNOWN

    def test_unknown_when_expected_end_equals_start(self):
        assert project_health(20, self.start, self.start, NOW) == ProjectHealth.UNKNOWN

    def test_future_project_is_good(self):
        start = NOW + timedelta(days=5)
        assert project_health(0, start, start + timedelta(days=10), NOW) == ProjectHealth.GOOD


def test_average_progress_of_empty_input_is_zero():
    assert average_progress([]) == 0


def test_average_progress_accepts_dicts_and_objects():
    assert average_progress([{'progress': 20}, {'progress': 40}]) == 30
    assert average_progress([SimpleNamespace(progress=10), SimpleNamespace(progress=0)]) == 5
