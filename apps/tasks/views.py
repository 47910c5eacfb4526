# apps/tasks/views.py
from django.http import JsonResponse

from apps.core.http import api_view, json_body, list_payload
from .adapters.orm_repositories import DjangoTaskRepository
from .application.services import TaskService


def task_service() -> TaskService:
    # Złożenie fasady (Manual Dependency Injection)
    return TaskService(repository=DjangoTaskRepository())


@api_view(['GET', 'POST'])
def task_collection_view(request):
    """Lista zadań z filtrami (status, priority, project) albo utworzenie zadania."""
    service = task_service()
    if request.method == 'POST':
        return JsonResponse(service.create(json_body(request)), status=201)
    return list_payload('tasks', service.list(request.GET))


@api_view(['GET'])
def task_stats_view(request):
    return task_service().stats()


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def task_detail_view(request, pk):
    service = task_service()
    if request.method == 'GET':
        return service.get(pk)
    if request.method == 'DELETE':
        service.delete(pk)
        return {'message': 'Task deleted successfully'}
    # PUT i PATCH: zmieniamy tylko przekazane pola
    return service.update(pk, json_body(request))
