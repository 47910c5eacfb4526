import django_filters

from apps.core.domain.entities import choices_of
from apps.core.filters import DayFilter
from .domain.entities import MeetingStatus
from .models import Meeting


class MeetingFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=choices_of(MeetingStatus))
    date = DayFilter(field_name='meeting_date')
    organizer = django_filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = Meeting
        fields = ['status', 'date', 'organizer']
