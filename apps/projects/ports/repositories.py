# apps/projects/ports/repositories.py
from abc import abstractmethod
from typing import Any, Mapping

from apps.core.ports.repositories import IEntityRepository
from apps.projects.domain.entities import ProjectEntity


class IProjectRepository(IEntityRepository):
    entity_name = 'Project'

    @abstractmethod
    def average_progress(self) -> float:
        pass

    @abstractmethod
    def add_milestone(self, project_id: int, data: Mapping[str, Any]) -> ProjectEntity:
        """Rzuca NotFound (Project) lub ValidationFailure."""
        pass

    @abstractmethod
    def update_milestone(self, project_id: int, milestone_id: int, data: Mapping[str, Any]) -> ProjectEntity:
        """Rzuca NotFound (Project / Milestone) lub ValidationFailure."""
        pass
