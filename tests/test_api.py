# tests/test_api.py
import json
from unittest import mock

import pytest
from django.db import OperationalError

from apps.tasks.models import Task

pytestmark = pytest.mark.django_db


def send(client, method, url, payload=None, raw=None):
    body = raw if raw is not None else json.dumps(payload or {})
    return getattr(client, method)(url, data=body, content_type='application/json')


def test_health(client):
    response = client.get('/api/health/')
    assert response.status_code == 200
    assert response.json() == {'message': 'Server is running!'}


def test_create_task_returns_201(client):
    response = send(client, 'post', '/api/tasks/',
                    {'title': 'Call client', 'assignedBy': 'Ann', 'assignedTo': 'Ben'})

    assert response.status_code == 201
    body = response.json()
    assert body['title'] == 'Call client'
    assert Task.objects.filter(pk=body['_id']).exists()


def test_validation_errors_are_400(client):
    response = send(client, 'post', '/api/tasks/', {'assignedBy': 'Ann', 'assignedTo': 'Ben'})

    assert response.status_code == 400
    assert response.json() == {'errors': [{'field': 'title', 'message': 'Title is required'}]}


def test_malformed_json_is_400(client):
    response = send(client, 'post', '/api/tasks/', raw='{"title": ')
    assert response.status_code == 400
    assert response.json()['errors'][0]['field'] == 'body'


def test_unknown_record_is_404(client):
    response = client.get('/api/goals/999/')
    assert response.status_code == 404
    assert response.json() == {'message': 'Goal not found'}


def test_list_shape(client, make_task):
    for i in range(3):
        make_task(title=f'task {i}')

    response = client.get('/api/tasks/', {'limit': 2})

    body = response.json()
    assert len(body['tasks']) == 2
    assert body['total'] == 3
    assert body['totalPages'] == 2
    assert body['currentPage'] == 1


def test_invalid_pagination_is_400(client):
    response = client.get('/api/projects/', {'page': 'first'})
    assert response.status_code == 400
    assert response.json()['errors'][0]['field'] == 'page'


def test_patch_updates_only_given_fields(client, make_task):
    task = make_task(title='Keep me', progress=5)

    response = send(client, 'patch', f'/api/tasks/{task.pk}/', {'progress': 55})

    assert response.status_code == 200
    assert response.json()['progress'] == 55
    assert response.json()['title'] == 'Keep me'


def test_delete_project_endpoint(client, make_project, make_task):
    project = make_project()
    make_task(project=project)

    response = client.delete(f'/api/projects/{project.pk}/')

    assert response.status_code == 200
    assert response.json() == {'message': 'Project deleted successfully'}
    assert Task.objects.count() == 0


def test_milestone_endpoints(client, make_project):
    project = make_project()

    created = send(client, 'post', f'/api/projects/{project.pk}/milestones/', {'title': 'Alpha'})
    milestone_id = created.json()['milestones'][0]['_id']
    updated = send(client, 'put', f'/api/projects/{project.pk}/milestones/{milestone_id}/',
                   {'status': 'completed'})

    assert updated.status_code == 200
    assert updated.json()['milestones'][0]['completedDate'] is not None


def test_goal_progress_endpoint(client, make_goal):
    goal = make_goal(target_value=10)

    response = send(client, 'put', f'/api/goals/{goal.pk}/progress/', {'currentValue': 10})

    assert response.status_code == 200
    assert response.json()['status'] == 'completed'
    assert response.json()['progress'] == 100


def test_stats_endpoints(client):
    for url, key in [
        ('/api/tasks/stats/', 'totalTasks'),
        ('/api/projects/stats/', 'totalProjects'),
        ('/api/meetings/stats/', 'totalMeetings'),
        ('/api/reminders/stats/', 'totalReminders'),
        ('/api/goals/stats/', 'totalGoals'),
    ]:
        response = client.get(url)
        assert response.status_code == 200
        assert response.json()[key] == 0


def test_analytics_endpoints(client):
    assert client.get('/api/analytics/dashboard/').status_code == 200
    response = client.get('/api/analytics/productivity/', {'period': 'week'})
    assert response.status_code == 400


def test_collection_routes(client):
    assert client.get('/api/meetings/today/').json() == []
    assert client.get('/api/meetings/upcoming/').json() == []
    assert client.get('/api/reminders/upcoming/').json() == []


def test_storage_failure_is_500(client):
    with mock.patch('apps.tasks.models.Task.objects.filter', side_effect=OperationalError('disk I/O error')):
        response = client.get('/api/tasks/stats/')

    assert response.status_code == 500
    assert response.json() == {'message': 'Server error'}


def test_method_not_allowed(client):
    assert client.delete('/api/tasks/').status_code == 405
