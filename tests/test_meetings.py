# tests/test_meetings.py
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.core.domain.errors import ValidationFailure
from apps.meetings.adapters.orm_repositories import DjangoMeetingRepository
from apps.meetings.application.services import MeetingService

pytestmark = pytest.mark.django_db


@pytest.fixture()
def service() -> MeetingService:
    return MeetingService(repository=DjangoMeetingRepository())


def meeting_payload(**overrides):
    payload = {
        'title': 'Sprint review',
        'meetingDate': '2024-04-02T00:00:00Z',
        'startTime': '14:00',
        'endTime': '15:00',
        'duration': 60,
        'organizer': 'Grace',
    }
    payload.update(overrides)
    return payload


def test_create_with_participant_names(service):
    record = service.create(meeting_payload(participants=['Heidi', {'name': 'Ivan', 'email': 'ivan@example.com'}]))

    assert record['status'] == 'scheduled'
    assert record['meetingType'] == 'in-person'
    assert record['participants'] == [
        {'name': 'Heidi', 'status': 'pending'},
        {'name': 'Ivan', 'email': 'ivan@example.com', 'status': 'pending'},
    ]


@pytest.mark.parametrize("field, value, message", [
    ('startTime', '25:00', 'Invalid start time format (HH:MM)'),
    ('endTime', '9am', 'Invalid end time format (HH:MM)'),
    ('duration', 0, 'Duration must be a positive number'),
])
def test_time_and_duration_are_validated(service, field, value, message):
    with pytest.raises(ValidationFailure) as exc:
        service.create(meeting_payload(**{field: value}))
    assert exc.value.to_list() == [{'field': field, 'message': message}]


def test_single_digit_hour_is_accepted(service):
    record = service.create(meeting_payload(startTime='9:30'))
    assert record['startTime'] == '9:30'


def test_duration_is_not_checked_against_times(service):
    record = service.create(meeting_payload(duration=5))
    assert record['duration'] == 5


def test_invalid_participant_email(service):
    with pytest.raises(ValidationFailure) as exc:
        service.create(meeting_payload(participants=[{'name': 'Judy', 'email': 'nope'}]))
    assert exc.value.errors[0].field == 'participants'


class TestListing:
    def test_date_filter_covers_whole_day(self, service, make_meeting):
        day = timezone.now().replace(hour=0, minute=0, second=0, microsecond=0)
        make_meeting(meeting_date=day)
        make_meeting(meeting_date=day + timedelta(hours=23, minutes=59))
        make_meeting(meeting_date=day + timedelta(days=1))
        make_meeting(meeting_date=day - timedelta(seconds=1))

        result = service.list({'date': day.date().isoformat()})

        assert result.total == 2

    def test_organizer_is_case_insensitive_substring(self, service, make_meeting):
        make_meeting(organizer='Carol Smith')
        make_meeting(organizer='Bob Jones')

        result = service.list({'organizer': 'SMITH'})

        assert [r['organizer'] for r in result.records] == ['Carol Smith']

    def test_sorted_by_date_then_start_time(self, service, make_meeting):
        day = timezone.now().replace(hour=0, minute=0, second=0, microsecond=0)
        late = make_meeting(meeting_date=day, start_time='16:00')
        early = make_meeting(meeting_date=day, start_time='08:00')
        tomorrow = make_meeting(meeting_date=day + timedelta(days=1), start_time='07:00')

        result = service.list({})

        assert [r['_id'] for r in result.records] == [early.pk, late.pk, tomorrow.pk]

    def test_malformed_date(self, service):
        with pytest.raises(ValidationFailure) as exc:
            service.list({'date': '2024-13-45'})
        assert exc.value.errors[0].field == 'date'


def test_today_lists_open_meetings(service, make_meeting):
    now = timezone.now()
    ongoing = make_meeting(meeting_date=now, status='ongoing', start_time='10:00')
    scheduled = make_meeting(meeting_date=now, status='scheduled', start_time='09:00')
    make_meeting(meeting_date=now, status='cancelled')
    make_meeting(meeting_date=now + timedelta(days=2))

    records = service.today()

    assert [r['_id'] for r in records] == [scheduled.pk, ongoing.pk]


def test_upcoming_lists_next_week_scheduled(service, make_meeting, settings):
    settings.WORKBOARD = {**settings.WORKBOARD, 'UPCOMING_MEETINGS_LIMIT': 2}
    now = timezone.now()
    first = make_meeting(meeting_date=now + timedelta(days=1))
    second = make_meeting(meeting_date=now + timedelta(days=2))
    make_meeting(meeting_date=now + timedelta(days=3))
    make_meeting(meeting_date=now + timedelta(days=1), status='cancelled')
    make_meeting(meeting_date=now + timedelta(days=8))
    make_meeting(meeting_date=now - timedelta(hours=1))

    records = service.upcoming()

    assert [r['_id'] for r in records] == [first.pk, second.pk]


def test_stats_counts_today(service, make_meeting):
    now = timezone.now()
    make_meeting(meeting_date=now, status='completed')
    make_meeting(meeting_date=now + timedelta(days=3))

    stats = service.stats()

    assert stats['totalMeetings'] == 2
    assert stats['todayMeetings'] == 1
    assert {'_id': 'completed', 'count': 1} in stats['statusBreakdown']
