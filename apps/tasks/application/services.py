# apps/tasks/application/services.py
from apps.core.application.services import EntityService
from apps.tasks.ports.repositories import ITaskRepository


class TaskService(EntityService):
    total_key = 'totalTasks'
    repository: ITaskRepository

    def stats(self):
        summary = super().stats()
        summary['averageProgress'] = self.repository.average_progress()
        return summary
