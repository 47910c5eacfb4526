import django_filters

from apps.core.domain.entities import choices_of
from .domain.entities import GoalCategory, GoalStatus
from .models import Goal


class GoalFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=choices_of(GoalStatus))
    category = django_filters.ChoiceFilter(choices=choices_of(GoalCategory))

    class Meta:
        model = Goal
        fields = ['status', 'category']
