# apps/core/filters.py
import django_filters
from django_filters.constants import EMPTY_VALUES

from apps.core.domain.querying import day_bounds


class DayFilter(django_filters.DateFilter):
    """Cały dzień: [początek dnia, początek następnego dnia) w strefie serwera."""

    def filter(self, qs, value):
        if value in EMPTY_VALUES:
            return qs
        start, end = day_bounds(value)
        return self.get_method(qs)(**{
            f'{self.field_name}__gte': start,
            f'{self.field_name}__lt': end,
        })
