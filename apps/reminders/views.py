# apps/reminders/views.py
from django.http import JsonResponse

from apps.core.http import api_view, json_body, list_payload
from .adapters.orm_repositories import DjangoReminderRepository
from .application.services import ReminderService


def reminder_service() -> ReminderService:
    return ReminderService(repository=DjangoReminderRepository())


@api_view(['GET', 'POST'])
def reminder_collection_view(request):
    service = reminder_service()
    if request.method == 'POST':
        return JsonResponse(service.create(json_body(request)), status=201)
    return list_payload('reminders', service.list(request.GET))


@api_view(['GET'])
def reminder_stats_view(request):
    return reminder_service().stats()


@api_view(['GET'])
def reminder_upcoming_view(request):
    return reminder_service().upcoming()


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def reminder_detail_view(request, pk):
    service = reminder_service()
    if request.method == 'GET':
        return service.get(pk)
    if request.method == 'DELETE':
        service.delete(pk)
        return {'message': 'Reminder deleted successfully'}
    return service.update(pk, json_body(request))
