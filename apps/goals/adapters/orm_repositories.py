# apps/goals/adapters/orm_repositories.py
from apps.core.adapters.orm_repositories import DjangoEntityRepository
from apps.goals.domain.entities import GoalEntity
from apps.goals.filters import GoalFilter
from apps.goals.forms import GoalForm
from apps.goals.models import Goal
from apps.goals.ports.repositories import IGoalRepository


class DjangoGoalRepository(DjangoEntityRepository, IGoalRepository):
    model = Goal
    entity_class = GoalEntity
    form_class = GoalForm
    filterset_class = GoalFilter
