# apps/projects/views.py
from django.http import JsonResponse

from apps.core.http import api_view, json_body, list_payload
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from .adapters.orm_repositories import DjangoProjectRepository
from .application.services import ProjectService


def project_service() -> ProjectService:
    return ProjectService(
        repository=DjangoProjectRepository(),
        task_repository=DjangoTaskRepository(),
    )


@api_view(['GET', 'POST'])
def project_collection_view(request):
    service = project_service()
    if request.method == 'POST':
        return JsonResponse(service.create(json_body(request)), status=201)
    return list_payload('projects', service.list(request.GET))


@api_view(['GET'])
def project_stats_view(request):
    return project_service().stats()


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def project_detail_view(request, pk):
    """Dashboard konkretnego projektu (z zadaniami i health)."""
    service = project_service()
    if request.method == 'GET':
        return service.get(pk)
    if request.method == 'DELETE':
        service.delete(pk)
        return {'message': 'Project deleted successfully'}
    return service.update(pk, json_body(request))


@api_view(['PUT'])
def project_progress_view(request, pk):
    return project_service().recalculate_progress(pk)


@api_view(['POST'])
def milestone_create_view(request, pk):
    return project_service().add_milestone(pk, json_body(request))


@api_view(['PUT', 'PATCH'])
def milestone_update_view(request, project_id, milestone_id):
    status = json_body(request).get('status')
    return project_service().update_milestone(project_id, milestone_id, status)
