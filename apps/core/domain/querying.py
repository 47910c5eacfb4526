# apps/core/domain/querying.py
import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, List, Mapping, Optional, Tuple

from django.conf import settings
from django.utils import timezone

from apps.core.domain.errors import FieldError, ValidationFailure


def default_page_size() -> int:
    return settings.WORKBOARD.get('PAGE_SIZE', 10)


def _positive_int(params: Mapping[str, Any], name: str, default: int, errors: List[FieldError]) -> int:
    raw = params.get(name)
    if raw in (None, ''):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        errors.append(FieldError(name, f"{name} must be an integer"))
        return default
    if value < 1:
        errors.append(FieldError(name, f"{name} must be at least 1"))
    return value


@dataclass
class PageRequest:
    page: int = 1
    limit: int = 10

    @classmethod
    def from_params(cls, params: Mapping[str, Any], default_limit: Optional[int] = None) -> 'PageRequest':
        """
        page (od 1) i limit z parametrów zapytania.
        Nie-liczby oraz wartości < 1 są odrzucane (ValidationFailure).
        """
        errors: List[FieldError] = []
        page = _positive_int(params, 'page', 1, errors)
        limit = _positive_int(params, 'limit', default_limit or default_page_size(), errors)
        if errors:
            raise ValidationFailure(errors)
        return cls(page=page, limit=limit)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def take(self) -> int:
        return self.limit

    def bounds(self) -> Tuple[int, int]:
        """Zakres do slicingu querysetu: [skip, skip+take)."""
        return self.skip, self.skip + self.take


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


@dataclass
class ListResult:
    records: List[Any] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0
    current_page: int = 1

    @classmethod
    def build(cls, records: List[Any], total: int, page: PageRequest) -> 'ListResult':
        return cls(
            records=records,
            total=total,
            total_pages=total_pages(total, page.limit),
            current_page=page.page,
        )

    def with_records(self, records: List[Any]) -> 'ListResult':
        return ListResult(records, self.total, self.total_pages, self.current_page)


def start_of_day(day: date) -> datetime:
    """Północ danego dnia w strefie serwera (settings.TIME_ZONE)."""
    return timezone.make_aware(datetime.combine(day, time.min))


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Przedział półotwarty [początek dnia, początek następnego dnia)."""
    start = start_of_day(day)
    return start, start_of_day(day + timedelta(days=1))