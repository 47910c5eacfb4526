# apps/projects/application/services.py
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Mapping

from django.utils import timezone

from apps.core.application.services import EntityService
from apps.core.domain.derived import average_progress, project_health, round_half_up
from apps.core.domain.errors import ValidationFailure
from apps.core.wire import snake_keys, to_wire
from apps.projects.domain.entities import MilestoneStatus, ProjectStatus
from apps.projects.ports.repositories import IProjectRepository
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


class ProjectService(EntityService):
    total_key = 'totalProjects'
    repository: IProjectRepository

    def __init__(self, repository: IProjectRepository, task_repository: ITaskRepository,
                 clock: Callable[[], datetime] = timezone.now):
        super().__init__(repository, clock)
        self.task_repository = task_repository

    def get(self, entity_id: int) -> Dict[str, Any]:
        """Projekt razem z jego zadaniami i wyliczonym 'health'."""
        project = self._require(entity_id)
        record = self.to_record(project)
        record['tasks'] = [to_wire(t) for t in self.task_repository.list_by_project(entity_id)]
        record['health'] = project_health(
            project.progress, project.start_date, project.expected_end_date, self.clock()
        )
        return record

    def delete(self, entity_id: int) -> None:
        """
        Usuwa projekt i wszystkie jego zadania.
        Dwa niezależne usunięcia (bez transakcji): najpierw zadania, potem projekt.
        """
        self._require(entity_id)
        removed = self.task_repository.delete_by_project(entity_id)
        super().delete(entity_id)
        logger.info("Project %s deleted together with %s tasks", entity_id, removed)

    def recalculate_progress(self, entity_id: int) -> Dict[str, Any]:
        """Postęp projektu = zaokrąglona średnia postępu jego zadań."""
        self._require(entity_id)
        tasks = self.task_repository.list_by_project(entity_id)
        if not tasks:
            return {'message': 'No tasks found for this project'}

        progress = round_half_up(average_progress(tasks))
        return self.update(entity_id, {'progress': progress})

    def add_milestone(self, project_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        changes = snake_keys(data)
        if changes.get('status') == MilestoneStatus.COMPLETED.value and not changes.get('completed_date'):
            changes['completed_date'] = self.clock()
        return self.to_record(self.repository.add_milestone(project_id, changes))

    def update_milestone(self, project_id: int, milestone_id: int, status: Any) -> Dict[str, Any]:
        if status in (None, ''):
            raise ValidationFailure.single('status', 'Milestone status is required')

        changes = {'status': status}
        # Każde oznaczenie jako completed stempluje datę ukończenia
        if status == MilestoneStatus.COMPLETED.value:
            changes['completed_date'] = self.clock()
        return self.to_record(self.repository.update_milestone(project_id, milestone_id, changes))

    def stats(self) -> Dict[str, Any]:
        summary = super().stats()
        summary['activeProjects'] = self.repository.count(status=ProjectStatus.ACTIVE.value)
        summary['averageProgress'] = self.repository.average_progress()
        return summary
