# apps/goals/application/use_cases.py
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from django.http import Http404

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.stages import partition_by_stage, validate_stage_update
from apps.goals.ports.repositories import IGoalRepository
from apps.groups.application.ownership import authorize_group, authorize_group_display
from apps.groups.domain.entities import GroupDisplay
from apps.groups.ports.repositories import IGroupRepository

logger = logging.getLogger(__name__)


@dataclass
class GoalInput:
    title: str
    stage: int = 0
    description: str = ""
    deadline: Optional[date] = None
    # Pole terminu nie przyszło w formularzu (ton bez terminów): zostaw zapisany
    keep_deadline: bool = False


@dataclass
class Board:
    group: GroupDisplay
    goals: List[GoalEntity]
    goals_in_stages: List[List[GoalEntity]]


def _validate(input_dto: GoalInput):
    if not input_dto.title or not input_dto.title.strip():
        raise ValueError("Goal title cannot be empty")
    validate_stage_update(input_dto.stage)


class GoalUseCase:
    def __init__(self, group_repository: IGroupRepository, goal_repository: IGoalRepository):
        self.group_repository = group_repository
        self.goal_repository = goal_repository


class GetBoardUseCase(GoalUseCase):
    """Grupa z tonem + cele podzielone na kolumny."""

    def execute(self, user_id: int, group_id: int) -> Board:
        group = authorize_group_display(self.group_repository, user_id, group_id)
        goals = self.goal_repository.list_goals(group.id)
        return Board(group=group, goals=goals, goals_in_stages=partition_by_stage(goals))


class CreateGoalUseCase(GoalUseCase):
    def execute(self, user_id: int, group_id: int, input_dto: GoalInput) -> int:
        group = authorize_group(self.group_repository, user_id, group_id)
        _validate(input_dto)

        goal_id = self.goal_repository.create_goal(
            group_id=group.id,
            title=input_dto.title,
            description=input_dto.description,
            deadline=input_dto.deadline,
            stage=input_dto.stage,
        )
        logger.info("User %s created goal %s in group %s", user_id, goal_id, group.id)
        return goal_id


class UpdateGoalUseCase(GoalUseCase):
    def execute(self, user_id: int, group_id: int, goal_id: int, input_dto: GoalInput) -> None:
        group = authorize_group(self.group_repository, user_id, group_id)
        _validate(input_dto)

        deadline = input_dto.deadline
        if input_dto.keep_deadline:
            current = self.goal_repository.get_goal(group.id, goal_id)
            if current is None:
                raise Http404("Goal not found")
            deadline = current.deadline

        updated = self.goal_repository.update_goal_fields(
            group_id=group.id,
            goal_id=goal_id,
            title=input_dto.title,
            description=input_dto.description,
            deadline=deadline,
            stage=input_dto.stage,
        )
        if not updated:
            raise Http404("Goal not found")
        logger.info("User %s updated goal %s", user_id, goal_id)


class ChangeGoalStageUseCase(GoalUseCase):
    """
    Przesunięcie celu na tablicy (drag & drop).

    Sprawdzamy tylko własność grupy; cel jest zawężony przez group_id w UPDATE.
    Dowolny etap 0-4 jest osiągalny z dowolnego innego.
    """

    def execute(self, user_id: int, group_id: int, goal_id: int, stage: int) -> None:
        group = authorize_group(self.group_repository, user_id, group_id)
        validate_stage_update(stage)

        if not self.goal_repository.update_goal_stage(goal_id, group.id, stage):
            raise Http404("Goal not found")
        logger.info("User %s moved goal %s to stage %s", user_id, goal_id, stage)


class DeleteGoalUseCase(GoalUseCase):
    def execute(self, user_id: int, group_id: int, goal_id: int) -> None:
        group = authorize_group(self.group_repository, user_id, group_id)

        if not self.goal_repository.delete_goal(group.id, goal_id):
            raise Http404("Goal not found")
        logger.info("User %s deleted goal %s", user_id, goal_id)
