import django_filters

from apps.core.domain.entities import choices_of
from apps.core.filters import DayFilter
from .domain.entities import ReminderCategory, ReminderStatus
from .models import Reminder


class ReminderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=choices_of(ReminderStatus))
    category = django_filters.ChoiceFilter(choices=choices_of(ReminderCategory))
    date = DayFilter(field_name='reminder_date')

    class Meta:
        model = Reminder
        fields = ['status', 'category', 'date']
