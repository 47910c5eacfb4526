# apps/meetings/views.py
from django.http import JsonResponse

from apps.core.http import api_view, json_body, list_payload
from .adapters.orm_repositories import DjangoMeetingRepository
from .application.services import MeetingService


def meeting_service() -> MeetingService:
    return MeetingService(repository=DjangoMeetingRepository())


@api_view(['GET', 'POST'])
def meeting_collection_view(request):
    """Lista spotkań (status, date, organizer) albo utworzenie spotkania."""
    service = meeting_service()
    if request.method == 'POST':
        return JsonResponse(service.create(json_body(request)), status=201)
    return list_payload('meetings', service.list(request.GET))


@api_view(['GET'])
def meeting_stats_view(request):
    return meeting_service().stats()


@api_view(['GET'])
def meeting_today_view(request):
    return meeting_service().today()


@api_view(['GET'])
def meeting_upcoming_view(request):
    return meeting_service().upcoming()


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def meeting_detail_view(request, pk):
    service = meeting_service()
    if request.method == 'GET':
        return service.get(pk)
    if request.method == 'DELETE':
        service.delete(pk)
        return {'message': 'Meeting deleted successfully'}
    return service.update(pk, json_body(request))
