# apps/groups/application/ownership.py
"""
Ownership Guard: autoryzacja i pobranie zasobu w jednym zapytaniu.

Zapytanie zawsze filtruje po user_id. Zero wierszy = 404, niezależnie od
tego, czy zasób nie istnieje, czy należy do innego użytkownika.
"""
import logging

from django.http import Http404

from apps.goals.domain.entities import GoalEntity
from apps.goals.ports.repositories import IGoalRepository
from apps.groups.domain.entities import GroupEntity, GroupDisplay
from apps.groups.ports.repositories import IGroupRepository

logger = logging.getLogger(__name__)


def authorize_group(repository: IGroupRepository, user_id: int, group_id: int) -> GroupEntity:
    group = repository.get_group(user_id, group_id)
    if group is None:
        logger.debug("Group %s not found for user %s", group_id, user_id)
        raise Http404("Group not found")
    return group


def authorize_group_display(repository: IGroupRepository, user_id: int, group_id: int) -> GroupDisplay:
    group = repository.get_group_with_tone(user_id, group_id)
    if group is None:
        logger.debug("Group %s not found for user %s", group_id, user_id)
        raise Http404("Group not found")
    return group


def find_goal_in_group(goal_repository: IGoalRepository, group_id: int, goal_id: int) -> GoalEntity:
    """Grupa musi być już autoryzowana; tu zawężamy cel do niej."""
    goal = goal_repository.get_goal(group_id, goal_id)
    if goal is None:
        logger.debug("Goal %s not found in group %s", goal_id, group_id)
        raise Http404("Goal not found")
    return goal


def authorize_goal(
        group_repository: IGroupRepository,
        goal_repository: IGoalRepository,
        user_id: int,
        group_id: int,
        goal_id: int,
) -> GoalEntity:
    # Cel należy do użytkownika przechodnio, przez grupę
    group = authorize_group(group_repository, user_id, group_id)
    return find_goal_in_group(goal_repository, group.id, goal_id)
