# tests/test_tasks.py
import pytest

from apps.core.domain.errors import NotFound, ValidationFailure
from apps.projects.models import Project
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from apps.tasks.application.services import TaskService
from apps.tasks.models import Task

pytestmark = pytest.mark.django_db


@pytest.fixture()
def service() -> TaskService:
    return TaskService(repository=DjangoTaskRepository())


def test_create_applies_defaults(service):
    record = service.create({'title': 'Draft plan', 'assignedBy': 'Alice', 'assignedTo': 'Bob'})

    assert record['_id'] is not None
    assert record['status'] == 'new'
    assert record['priority'] == 'medium'
    assert record['progress'] == 0
    assert record['tags'] == []
    assert record['project'] is None
    assert record['createdAt'] is not None


def test_create_reports_every_violation(service):
    with pytest.raises(ValidationFailure) as exc:
        service.create({'status': 'done', 'progress': 150})

    errors = {e.field: e.message for e in exc.value.errors}
    assert errors['title'] == 'Title is required'
    assert errors['assignedBy'] == 'Assigned by is required'
    assert errors['assignedTo'] == 'Assigned to is required'
    assert errors['status'] == 'Invalid status'
    assert errors['progress'] == 'Progress must be between 0 and 100'
    assert Task.objects.count() == 0


def test_create_ignores_unknown_fields(service):
    record = service.create({
        'title': 'Draft plan', 'assignedBy': 'Alice', 'assignedTo': 'Bob', 'isAdmin': True,
    })
    assert 'isAdmin' not in record


def test_task_references_project(service, make_project):
    project = make_project(name='Launch')
    record = service.create({
        'title': 'Draft plan', 'assignedBy': 'Alice', 'assignedTo': 'Bob', 'project': project.pk,
    })
    assert record['project'] == {'_id': project.pk, 'name': 'Launch'}


def test_unknown_project_is_rejected(service):
    with pytest.raises(ValidationFailure) as exc:
        service.create({'title': 'X', 'assignedBy': 'A', 'assignedTo': 'B', 'project': 9999})
    assert exc.value.to_list() == [{'field': 'project', 'message': 'Project not found'}]


def test_partial_update_keeps_other_fields(service, make_task):
    task = make_task(title='Original', priority='high', tags=['ops'])

    record = service.update(task.pk, {'progress': 40})

    assert record['progress'] == 40
    assert record['title'] == 'Original'
    assert record['priority'] == 'high'
    assert record['tags'] == ['ops']


def test_update_refreshes_updated_at(service, make_task):
    task = make_task()
    before = task.updated_at

    service.update(task.pk, {'status': 'inprogress'})

    task.refresh_from_db()
    assert task.updated_at > before


def test_invalid_update_leaves_record_untouched(service, make_task):
    task = make_task(progress=10)
    with pytest.raises(ValidationFailure):
        service.update(task.pk, {'progress': -3, 'title': 'Changed'})

    task.refresh_from_db()
    assert task.progress == 10
    assert task.title == 'Write copy'


def test_missing_task_is_not_found(service):
    with pytest.raises(NotFound):
        service.get(12345)
    with pytest.raises(NotFound):
        service.update(12345, {'title': 'x'})
    with pytest.raises(NotFound):
        service.delete(12345)


def test_delete_removes_task(service, make_task):
    task = make_task()
    service.delete(task.pk)
    assert not Task.objects.filter(pk=task.pk).exists()


def test_delete_task_keeps_its_project(service, make_task, make_project):
    project = make_project()
    task = make_task(project=project)

    service.delete(task.pk)

    assert not Task.objects.filter(pk=task.pk).exists()
    assert Project.objects.filter(pk=project.pk).exists()


class TestListing:
    def test_filters_are_combined(self, service, make_task, make_project):
        project = make_project()
        make_task(status='new', priority='high', project=project)
        make_task(status='new', priority='low', project=project)
        make_task(status='completed', priority='high', project=project)
        make_task(status='new', priority='high')

        result = service.list({'status': 'new', 'priority': 'high', 'project': str(project.pk)})

        assert result.total == 1
        assert result.records[0]['status'] == 'new'
        assert result.records[0]['priority'] == 'high'

    def test_newest_first(self, service, make_task):
        first = make_task(title='first')
        second = make_task(title='second')

        result = service.list({})

        assert [r['_id'] for r in result.records] == [second.pk, first.pk]

    def test_pagination(self, service, make_task):
        for i in range(12):
            make_task(title=f'task {i}')

        result = service.list({'page': '2', 'limit': '5'})

        assert result.total == 12
        assert result.total_pages == 3
        assert result.current_page == 2
        assert len(result.records) == 5

    def test_page_past_the_end_is_empty(self, service, make_task):
        make_task()
        result = service.list({'page': '4'})
        assert result.records == []
        assert result.total == 1

    def test_invalid_filter_value(self, service):
        with pytest.raises(ValidationFailure) as exc:
            service.list({'status': 'someday'})
        assert exc.value.errors[0].field == 'status'


def test_stats(service, make_task):
    make_task(status='new', progress=0)
    make_task(status='new', progress=20)
    make_task(status='completed', progress=100)

    stats = service.stats()

    assert stats['totalTasks'] == 3
    assert stats['averageProgress'] == pytest.approx(40)
    assert sorted(stats['statusBreakdown'], key=lambda r: r['_id']) == [
        {'_id': 'completed', 'count': 1},
        {'_id': 'new', 'count': 2},
    ]


def test_stats_on_empty_store(service):
    stats = service.stats()
    assert stats == {'statusBreakdown': [], 'totalTasks': 0, 'averageProgress': 0}
