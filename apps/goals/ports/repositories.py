# apps/goals/ports/repositories.py
from apps.core.ports.repositories import IEntityRepository


class IGoalRepository(IEntityRepository):
    entity_name = 'Goal'
