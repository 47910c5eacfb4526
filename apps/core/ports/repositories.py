# apps/core/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from apps.core.domain.querying import ListResult, PageRequest


class IEntityRepository(ABC):
    """Port dostępu do danych jednej encji. Fasady dostają go przez konstruktor."""

    entity_name: str = 'Record'

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[Any]:
        pass

    @abstractmethod
    def list(self, params: Mapping[str, Any], page: PageRequest) -> ListResult:
        """Filtry z params (AND), domyślne sortowanie encji, stronicowanie."""
        pass

    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> Any:
        """Waliduje i tworzy rekord. Rzuca ValidationFailure."""
        pass

    @abstractmethod
    def update(self, entity_id: int, data: Mapping[str, Any]) -> Optional[Any]:
        """Zmienia tylko podane pola. None gdy rekord nie istnieje."""
        pass

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        pass

    @abstractmethod
    def count(self, **criteria) -> int:
        pass

    @abstractmethod
    def status_breakdown(self) -> List[Dict[str, Any]]:
        """[{'_id': status, 'count': n}] - tylko statusy obecne w danych."""
        pass
