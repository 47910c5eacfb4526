# apps/tasks/ports/repositories.py
from abc import abstractmethod
from typing import List

from apps.core.ports.repositories import IEntityRepository
from apps.tasks.domain.entities import TaskEntity


class ITaskRepository(IEntityRepository):
    entity_name = 'Task'

    @abstractmethod
    def list_by_project(self, project_id: int) -> List[TaskEntity]:
        pass

    @abstractmethod
    def delete_by_project(self, project_id: int) -> int:
        """Usuwa zadania projektu i zwraca ich liczbę."""
        pass

    @abstractmethod
    def average_progress(self) -> float:
        """Średni postęp wszystkich zadań (niezależnie od statusu)."""
        pass
