# apps/reports/views.py
from django.conf import settings

from apps.core.http import api_view
from .domain.services import ReportService, parse_period


@api_view(['GET'])
def dashboard_view(request):
    """Dane do wykresów dashboardu (zadania, projekty, spotkania, przypomnienia)."""
    return ReportService().get_dashboard()


@api_view(['GET'])
def productivity_view(request):
    default = settings.WORKBOARD.get('PRODUCTIVITY_WINDOW_DAYS', 7)
    return ReportService().get_productivity(parse_period(request.GET, default))
