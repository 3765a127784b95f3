# apps/groups/adapters/orm_repositories.py
import logging
from typing import List, Mapping, Optional

from django.db import DatabaseError

from apps.goals.domain.stages import stages_of
from apps.groups.domain.entities import GroupEntity, GroupDisplay, GroupLink
from apps.groups.filters import GroupFilter
from apps.groups.models import Group as GroupModel
from apps.groups.ports.repositories import IGroupRepository
from apps.tones.domain.entities import ToneEntity
from apps.tones.models import Tone as ToneModel

logger = logging.getLogger(__name__)


class DjangoGroupRepository(IGroupRepository):
    def to_entity(self, model: GroupModel) -> GroupEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GroupEntity(
            id=model.id,
            title=model.title,
            description=model.description,
            tone_id=model.tone_id,
            user_id=model.user_id,
        )

    def to_display(self, model: GroupModel) -> GroupDisplay:
        # Dzięki select_related('tone') nie ma dodatkowego zapytania
        tone = model.tone
        return GroupDisplay(
            id=model.id,
            title=model.title,
            description=model.description,
            tone_name=tone.name,
            stages=stages_of(tone),
            greeting=tone.greeting,
            deadline=tone.deadline,
            unmet_behavior=tone.unmet_behavior,
        )

    def to_tone_entity(self, model: ToneModel) -> ToneEntity:
        return ToneEntity(
            id=model.id,
            name=model.name,
            stages=stages_of(model),
            deadline=model.deadline,
            is_global=model.is_global,
            greeting=model.greeting,
            unmet_behavior=model.unmet_behavior,
            user_id=model.user_id,
        )

    def list_groups(self, user_id: int, criteria: Optional[Mapping] = None) -> List[GroupEntity]:
        qs = GroupModel.objects.filter(user_id=user_id)
        if criteria:
            qs = GroupFilter(criteria, queryset=qs).qs
        return [self.to_entity(g) for g in qs]

    def get_group(self, user_id: int, group_id: int) -> Optional[GroupEntity]:
        try:
            group = GroupModel.objects.get(id=group_id, user_id=user_id)
            return self.to_entity(group)
        except GroupModel.DoesNotExist:
            return None

    def create_group(self, user_id: int, title: str, description: str, tone_id: int) -> int:
        try:
            obj = GroupModel.objects.create(
                user_id=user_id,
                title=title,
                description=description,
                tone_id=tone_id,
            )
        except DatabaseError:
            logger.exception("Could not insert group for user %s", user_id)
            raise
        return obj.id

    def update_group(self, user_id: int, group_id: int, title: str, description: str, tone_id: int) -> int:
        return GroupModel.objects.filter(id=group_id, user_id=user_id).update(
            title=title,
            description=description,
            tone_id=tone_id,
        )

    def delete_group(self, user_id: int, group_id: int) -> int:
        # on_delete=CASCADE na Goal.group usuwa też cele
        _, per_model = GroupModel.objects.filter(id=group_id, user_id=user_id).delete()
        return per_model.get(GroupModel._meta.label, 0)

    def list_tones(self, user_id: int) -> List[ToneEntity]:
        return [self.to_tone_entity(t) for t in ToneModel.objects.eligible_for(user_id)]

    def get_group_with_tone(self, user_id: int, group_id: int) -> Optional[GroupDisplay]:
        try:
            group = GroupModel.objects.select_related('tone').get(id=group_id, user_id=user_id)
            return self.to_display(group)
        except GroupModel.DoesNotExist:
            return None

    def list_group_links(self, user_id: int) -> List[GroupLink]:
        rows = GroupModel.objects.filter(user_id=user_id).values_list('id', 'title')
        return [GroupLink(id=pk, title=title) for pk, title in rows]
