import django_filters

from apps.core.domain.entities import Priority, choices_of
from .domain.entities import ProjectStatus
from .models import Project


class ProjectFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=choices_of(ProjectStatus))
    priority = django_filters.ChoiceFilter(choices=choices_of(Priority))

    class Meta:
        model = Project
        fields = ['status', 'priority']
