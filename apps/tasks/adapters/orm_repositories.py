# apps/tasks/adapters/orm_repositories.py
import logging
from typing import List

from apps.core.adapters.orm_repositories import DjangoEntityRepository, project_ref, storage_errors
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.filters import TaskFilter
from apps.tasks.forms import TaskForm
from apps.tasks.models import Task as TaskModel
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


class DjangoTaskRepository(DjangoEntityRepository, ITaskRepository):
    model = TaskModel
    entity_class = TaskEntity
    form_class = TaskForm
    filterset_class = TaskFilter

    def queryset(self):
        # select_related: projekt {_id, name} bez dodatkowego zapytania per zadanie
        return TaskModel.objects.select_related('project')

    def entity_values(self, obj):
        values = super().entity_values(obj)
        values['project'] = project_ref(obj.project)
        return values

    def list_by_project(self, project_id: int) -> List[TaskEntity]:
        with storage_errors(self.entity_name):
            qs = self.queryset().filter(project_id=project_id).order_by('-created_at', '-id')
            return [self.to_entity(t) for t in qs]

    def delete_by_project(self, project_id: int) -> int:
        with storage_errors(self.entity_name):
            deleted, _ = TaskModel.objects.filter(project_id=project_id).delete()
        logger.info("Deleted %s tasks of project %s", deleted, project_id)
        return deleted

    def average_progress(self) -> float:
        return self.average('progress')
