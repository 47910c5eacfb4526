# apps/goals/views.py
from django.http import JsonResponse

from apps.core.http import api_view, json_body, list_payload
from .adapters.orm_repositories import DjangoGoalRepository
from .application.services import GoalService


def goal_service() -> GoalService:
    return GoalService(repository=DjangoGoalRepository())


@api_view(['GET', 'POST'])
def goal_collection_view(request):
    service = goal_service()
    if request.method == 'POST':
        return JsonResponse(service.create(json_body(request)), status=201)
    return list_payload('goals', service.list(request.GET))


@api_view(['GET'])
def goal_stats_view(request):
    return goal_service().stats()


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def goal_detail_view(request, pk):
    service = goal_service()
    if request.method == 'GET':
        return service.get(pk)
    if request.method == 'DELETE':
        service.delete(pk)
        return {'message': 'Goal deleted successfully'}
    return service.update(pk, json_body(request))


@api_view(['PUT', 'PATCH'])
def goal_progress_view(request, pk):
    return goal_service().update_progress(pk, json_body(request).get('currentValue'))
