# tests/test_querying.py
from datetime import date, datetime

import pytest

from apps.core.domain.errors import ValidationFailure
from apps.core.domain.querying import ListResult, PageRequest, day_bounds, total_pages
from apps.core.wire import snake_keys, to_camel, to_snake, to_wire
from apps.tasks.domain.entities import TaskEntity, TaskStatus


def test_page_request_defaults(settings):
    settings.WORKBOARD = {**settings.WORKBOARD, 'PAGE_SIZE': 10}
    page = PageRequest.from_params({})
    assert (page.page, page.limit) == (1, 10)
    assert page.skip == 0


def test_page_request_skip_and_take():
    page = PageRequest.from_params({'page': '3', 'limit': '5'})
    assert page.bounds() == (10, 15)
    assert page.take == 5


@pytest.mark.parametrize("params, field", [
    ({'page': 'abc'}, 'page'),
    ({'page': '0'}, 'page'),
    ({'limit': '-1'}, 'limit'),
    ({'limit': '2.5'}, 'limit'),
])
def test_page_request_rejects_invalid_values(params, field):
    with pytest.raises(ValidationFailure) as exc:
        PageRequest.from_params(params)
    assert [e.field for e in exc.value.errors] == [field]


def test_total_pages_rounds_up():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


def test_list_result_build():
    result = ListResult.build(['a', 'b'], total=12, page=PageRequest(page=2, limit=5))
    assert result.total_pages == 3
    assert result.current_page == 2


def test_day_bounds_use_server_time_zone(settings):
    settings.TIME_ZONE = 'Europe/Warsaw'
    start, end = day_bounds(date(2024, 3, 15))
    assert start.isoformat() == '2024-03-15T00:00:00+01:00'
    assert (end - start).days == 1


def test_name_conversion():
    assert to_snake('expectedEndDate') == 'expected_end_date'
    assert to_snake('_id') == 'id'
    assert to_camel('assigned_by') == 'assignedBy'
    assert to_camel('id') == '_id'
    assert snake_keys({'teamMembers': [{'joinedDate': 'x'}]}) == {'team_members': [{'joinedDate': 'x'}]}


def test_to_wire_converts_entities():
    task = TaskEntity(id=7, title='Ship', status=TaskStatus.IN_PROGRESS,
                      created_at=datetime(2024, 1, 2, 3, 4, 5))
    record = to_wire(task)
    assert record['_id'] == 7
    assert record['status'] == 'inprogress'
    assert record['createdAt'] == '2024-01-02T03:04:05'
    assert record['assignedTo'] == ''
