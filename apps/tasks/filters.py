import django_filters

from apps.core.domain.entities import Priority, choices_of
from .domain.entities import TaskStatus
from .models import Task


class TaskFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=choices_of(TaskStatus))
    priority = django_filters.ChoiceFilter(choices=choices_of(Priority))
    # Po samym ID: nieistniejący projekt daje pustą listę, nie błąd
    project = django_filters.NumberFilter(field_name='project_id')

    class Meta:
        model = Task
        fields = ['status', 'priority', 'project']
