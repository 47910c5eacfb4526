# apps/meetings/ports/repositories.py
from abc import abstractmethod
from datetime import datetime
from typing import List, Optional

from apps.core.ports.repositories import IEntityRepository
from apps.meetings.domain.entities import MeetingEntity


class IMeetingRepository(IEntityRepository):
    entity_name = 'Meeting'

    @abstractmethod
    def count_between(self, start: datetime, end: datetime) -> int:
        """Liczba spotkań z meeting_date w [start, end) - bez względu na status."""
        pass

    @abstractmethod
    def list_between(self, start: datetime, end: datetime, statuses: List[str],
                     limit: Optional[int] = None) -> List[MeetingEntity]:
        """Spotkania w [start, end) o podanych statusach, rosnąco po dacie i godzinie."""
        pass
