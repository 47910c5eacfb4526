# apps/goals/application/services.py
import logging
from typing import Any, Dict, Mapping

from apps.core.application.services import EntityService
from apps.core.domain.derived import goal_is_overdue, goal_progress
from apps.core.domain.errors import NotFound, ValidationFailure
from apps.core.wire import snake_keys
from apps.goals.domain.entities import GoalEntity, GoalStatus
from apps.goals.ports.repositories import IGoalRepository

logger = logging.getLogger(__name__)


def _current_value(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValidationFailure.single('currentValue', 'Current value must be a positive number')
    return value


class GoalService(EntityService):
    total_key = 'totalGoals'
    repository: IGoalRepository

    def to_record(self, entity: GoalEntity) -> Dict[str, Any]:
        record = super().to_record(entity)
        record['progress'] = goal_progress(entity.current_value, entity.target_value)
        record['isOverdue'] = goal_is_overdue(entity.status.value, entity.target_date, self.clock())
        return record

    def _save(self, entity_id: int, changes: Mapping[str, Any]) -> Dict[str, Any]:
        goal = self.repository.update(entity_id, changes)
        if goal is None:
            raise NotFound(self.entity_name, entity_id)
        return self.to_record(goal)

    def update(self, entity_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        changes = snake_keys(data)
        if changes.get('status') == GoalStatus.COMPLETED.value and not changes.get('completed_date'):
            goal = self._require(entity_id)
            # Przejście w completed bez podanej daty: stemplujemy teraz
            if not goal.is_completed() and goal.completed_date is None:
                changes['completed_date'] = self.clock()
        return self._save(entity_id, changes)

    def update_progress(self, entity_id: int, current_value: Any) -> Dict[str, Any]:
        """
        Ustawia currentValue. Osiągnięcie targetValue kończy cel
        (status completed + completedDate), o ile nie był już ukończony.
        """
        goal = self._require(entity_id)
        value = _current_value(current_value)

        changes = {'current_value': value}
        if goal.reaches_target(value) and not goal.is_completed():
            changes['status'] = GoalStatus.COMPLETED.value
            changes['completed_date'] = self.clock()
            logger.info("Goal %s reached its target (%s %s)", entity_id, value, goal.unit)
        return self._save(entity_id, changes)

    def stats(self) -> Dict[str, Any]:
        summary = super().stats()
        summary['completedGoals'] = self.repository.count(status=GoalStatus.COMPLETED.value)
        summary['activeGoals'] = self.repository.count(status=GoalStatus.ACTIVE.value)
        return summary
