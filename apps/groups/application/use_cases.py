# apps/groups/application/use_cases.py
import logging
from dataclasses import dataclass

from django.http import Http404

from apps.groups.application.ownership import authorize_group
from apps.groups.domain.entities import GroupEntity
from apps.groups.ports.repositories import IGroupRepository

logger = logging.getLogger(__name__)


@dataclass
class GroupInput:
    title: str
    tone_id: int
    user_id: int
    description: str = ""


def _validate(input_dto: GroupInput):
    if not input_dto.title or not input_dto.title.strip():
        raise ValueError("Group title cannot be empty")


class CreateGroupUseCase:
    def __init__(self, repository: IGroupRepository):
        self.repository = repository

    def execute(self, input_dto: GroupInput) -> int:
        _validate(input_dto)

        group_id = self.repository.create_group(
            user_id=input_dto.user_id,
            title=input_dto.title,
            description=input_dto.description,
            tone_id=input_dto.tone_id,
        )
        logger.info("User %s created group %s", input_dto.user_id, group_id)
        return group_id


class UpdateGroupUseCase:
    def __init__(self, repository: IGroupRepository):
        self.repository = repository

    def execute(self, group_id: int, input_dto: GroupInput) -> None:
        _validate(input_dto)
        authorize_group(self.repository, input_dto.user_id, group_id)

        # UPDATE i tak filtruje po właścicielu; 0 wierszy = grupa zniknęła w międzyczasie
        updated = self.repository.update_group(
            user_id=input_dto.user_id,
            group_id=group_id,
            title=input_dto.title,
            description=input_dto.description,
            tone_id=input_dto.tone_id,
        )
        if not updated:
            raise Http404("Group not found")
        logger.info("User %s updated group %s", input_dto.user_id, group_id)


class DeleteGroupUseCase:
    def __init__(self, repository: IGroupRepository):
        self.repository = repository

    def execute(self, user_id: int, group_id: int) -> GroupEntity:
        group = authorize_group(self.repository, user_id, group_id)

        if not self.repository.delete_group(user_id, group_id):
            raise Http404("Group not found")
        logger.info("User %s deleted group %s with all its goals", user_id, group_id)
        return group
