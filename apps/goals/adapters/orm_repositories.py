# apps/goals/adapters/orm_repositories.py
import logging
from datetime import date
from typing import List, Optional

from django.db import DatabaseError

from apps.goals.domain.entities import GoalEntity
from apps.goals.models import Goal as GoalModel
from apps.goals.ports.repositories import IGoalRepository

logger = logging.getLogger(__name__)


class DjangoGoalRepository(IGoalRepository):
    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.id,
            title=model.title,
            group_id=model.group_id,
            stage=model.stage,
            description=model.description,
            deadline=model.deadline,
        )

    def list_goals(self, group_id: int) -> List[GoalEntity]:
        # Kolejność wstawiania = kolejność w kolumnach tablicy
        qs = GoalModel.objects.filter(group_id=group_id).order_by('id')
        return [self.to_entity(g) for g in qs]

    def get_goal(self, group_id: int, goal_id: int) -> Optional[GoalEntity]:
        try:
            goal = GoalModel.objects.get(id=goal_id, group_id=group_id)
            return self.to_entity(goal)
        except GoalModel.DoesNotExist:
            return None

    def create_goal(self, group_id: int, title: str, description: str,
                    deadline: Optional[date], stage: int) -> int:
        try:
            obj = GoalModel.objects.create(
                group_id=group_id,
                title=title,
                description=description,
                deadline=deadline,
                stage=stage,
            )
        except DatabaseError:
            logger.exception("Could not insert goal into group %s", group_id)
            raise
        return obj.id

    def update_goal_fields(self, group_id: int, goal_id: int, title: str, description: str,
                           deadline: Optional[date], stage: int) -> int:
        return GoalModel.objects.filter(id=goal_id, group_id=group_id).update(
            title=title,
            description=description,
            deadline=deadline,
            stage=stage,
        )

    def update_goal_stage(self, goal_id: int, group_id: int, stage: int) -> int:
        try:
            return GoalModel.objects.filter(id=goal_id, group_id=group_id).update(stage=stage)
        except DatabaseError:
            logger.exception("Could not update stage of goal %s", goal_id)
            raise

    def delete_goal(self, group_id: int, goal_id: int) -> int:
        deleted, _ = GoalModel.objects.filter(id=goal_id, group_id=group_id).delete()
        return deleted
