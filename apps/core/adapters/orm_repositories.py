# apps/core/adapters/orm_repositories.py
import logging
from contextlib import contextmanager
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, get_args, get_type_hints

from django.db import DatabaseError
from django.db.models import Avg, Count

from apps.core.domain.entities import ProjectRef
from apps.core.domain.errors import StorageFailure, ValidationFailure
from apps.core.domain.querying import ListResult, PageRequest
from apps.core.forms import form_errors
from apps.core.ports.repositories import IEntityRepository

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(entity_name: str):
    """DatabaseError z ORM -> StorageFailure (bez ponawiania)."""
    try:
        yield
    except DatabaseError as exc:
        raise StorageFailure(f"{entity_name} storage error: {exc}") from exc


def _coerce(hint, value):
    if value is None:
        return None
    for candidate in (hint, *get_args(hint)):
        if isinstance(candidate, type) and issubclass(candidate, Enum):
            return candidate(value)
    return value


def project_ref(project) -> Optional[ProjectRef]:
    if project is None:
        return None
    return ProjectRef(id=project.id, name=project.name)


class DjangoEntityRepository(IEntityRepository):
    """
    Wspólny adapter Django dla encji: filtrowanie przez FilterSet,
    zapisy przez EntityForm, konwersja Model -> dataclass.
    """

    model = None
    entity_class = None
    form_class = None
    filterset_class = None
    ordering = ('-created_at', '-id')

    def queryset(self):
        return self.model.objects.all()

    # ---- konwersja ----

    def entity_values(self, obj) -> Dict[str, Any]:
        hints = get_type_hints(self.entity_class)
        return {
            f.name: _coerce(hints.get(f.name), getattr(obj, f.name, None))
            for f in fields(self.entity_class)
        }

    def to_entity(self, obj):
        """Konwertuje Model Django -> Czystą Encję."""
        return self.entity_class(**self.entity_values(obj))

    def _get_model(self, entity_id: int):
        with storage_errors(self.entity_name):
            return self.queryset().filter(pk=entity_id).first()

    # ---- odczyt ----

    def get_by_id(self, entity_id: int):
        obj = self._get_model(entity_id)
        return self.to_entity(obj) if obj else None

    def list(self, params: Mapping[str, Any], page: PageRequest) -> ListResult:
        filterset = self.filterset_class(params, queryset=self.queryset().order_by(*self.ordering))
        if not filterset.is_valid():
            raise ValidationFailure(form_errors(filterset.form))

        start, end = page.bounds()
        with storage_errors(self.entity_name):
            qs = filterset.qs
            total = qs.count()
            records = [self.to_entity(obj) for obj in qs[start:end]]
        return ListResult.build(records, total, page)

    def count(self, **criteria) -> int:
        with storage_errors(self.entity_name):
            return self.model.objects.filter(**criteria).count()

    def status_breakdown(self) -> List[Dict[str, Any]]:
        with storage_errors(self.entity_name):
            rows = self.model.objects.values('status').annotate(count=Count('id')).order_by()
            return [{'_id': row['status'], 'count': row['count']} for row in rows]

    def average(self, field_name: str, **criteria) -> float:
        with storage_errors(self.entity_name):
            result = self.model.objects.filter(**criteria).aggregate(value=Avg(field_name))
        return result['value'] or 0

    # ---- zapis ----

    def _save_form(self, form):
        if not form.is_valid():
            raise ValidationFailure(form_errors(form))
        with storage_errors(self.entity_name):
            return form.save()

    def create(self, data: Mapping[str, Any]):
        obj = self._save_form(self.form_class.for_create(data))
        logger.info("%s created id=%s", self.entity_name, obj.pk)
        return self.get_by_id(obj.pk)

    def update(self, entity_id: int, data: Mapping[str, Any]):
        obj = self._get_model(entity_id)
        if obj is None:
            return None
        self._save_form(self.form_class.for_update(obj, data))
        logger.info("%s updated id=%s fields=%s", self.entity_name, entity_id, sorted(data))
        return self.get_by_id(entity_id)

    def delete(self, entity_id: int) -> bool:
        with storage_errors(self.entity_name):
            deleted, _ = self.model.objects.filter(pk=entity_id).delete()
        if deleted:
            logger.info("%s deleted id=%s", self.entity_name, entity_id)
        return deleted > 0
