# apps/core/application/services.py
from datetime import datetime
from typing import Any, Callable, Dict, Mapping

from django.utils import timezone

from apps.core.domain.errors import NotFound
from apps.core.domain.querying import ListResult, PageRequest
from apps.core.ports.repositories import IEntityRepository
from apps.core.wire import snake_keys, to_wire


class EntityService:
    """
    Fasada jednej encji: list / get / create / update / delete / stats.
    Przyjmuje i zwraca dane w formacie API (camelCase, `_id`).
    """

    # Klucz licznika w stats(), np. 'totalTasks'
    total_key = 'total'

    def __init__(self, repository: IEntityRepository, clock: Callable[[], datetime] = timezone.now):
        self.repository = repository
        self.clock = clock

    @property
    def entity_name(self) -> str:
        return self.repository.entity_name

    def to_record(self, entity) -> Dict[str, Any]:
        """Encja -> rekord API. Tu dokładamy pola wyliczane."""
        return to_wire(entity)

    def _require(self, entity_id: int):
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return entity

    def list(self, params: Mapping[str, Any]) -> ListResult:
        page = PageRequest.from_params(params)
        result = self.repository.list(params, page)
        return result.with_records([self.to_record(e) for e in result.records])

    def get(self, entity_id: int) -> Dict[str, Any]:
        return self.to_record(self._require(entity_id))

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.to_record(self.repository.create(snake_keys(data)))

    def update(self, entity_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        entity = self.repository.update(entity_id, snake_keys(data))
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return self.to_record(entity)

    def delete(self, entity_id: int) -> None:
        if not self.repository.delete(entity_id):
            raise NotFound(self.entity_name, entity_id)

    def stats(self) -> Dict[str, Any]:
        return {
            'statusBreakdown': self.repository.status_breakdown(),
            self.total_key: self.repository.count(),
        }
