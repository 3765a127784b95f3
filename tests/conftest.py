"""
Shared fixtures: users, tones, groups, goals and in-memory repositories.
"""
import itertools

import pytest

from apps.goals.domain.entities import GoalEntity
from apps.goals.models import Goal
from apps.goals.ports.repositories import IGoalRepository
from apps.groups.domain.entities import GroupDisplay, GroupEntity, GroupLink
from apps.groups.models import Group
from apps.groups.ports.repositories import IGroupRepository
from apps.tones.domain.entities import ToneEntity
from apps.tones.models import Tone


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='alice', password='secret-pass-123')


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username='bob', password='secret-pass-456')


@pytest.fixture
def tone(db):
    return Tone.objects.create(
        name='Kanban',
        stages=['Backlog', 'Doing', 'Review', 'Done'],
        deadline=Tone.DeadlineMode.SOFT,
        is_global=True,
        greeting='Hello there',
    )


@pytest.fixture
def private_tone(other_user):
    return Tone.objects.create(name="Bob's tone", stages=['a', 'b', 'c', 'd'], user=other_user)


@pytest.fixture
def group(user, tone):
    return Group.objects.create(user=user, title='Fitness', description='Get fit', tone=tone)


@pytest.fixture
def foreign_group(other_user, tone):
    return Group.objects.create(user=other_user, title='Secret plans', tone=tone)


@pytest.fixture
def make_goal():
    def _make(group, title='Goal', stage=0, **kwargs):
        return Goal.objects.create(group=group, title=title, stage=stage, **kwargs)
    return _make


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


class InMemoryGroupRepository(IGroupRepository):
    def __init__(self, tones=None):
        self.groups = {}
        self.tones = {t.id: t for t in (tones or [])}
        self._ids = itertools.count(1)

    def list_groups(self, user_id, criteria=None):
        return [g for g in self.groups.values() if g.user_id == user_id]

    def get_group(self, user_id, group_id):
        group = self.groups.get(group_id)
        return group if group and group.user_id == user_id else None

    def create_group(self, user_id, title, description, tone_id):
        group_id = next(self._ids)
        self.groups[group_id] = GroupEntity(id=group_id, title=title, description=description,
                                            tone_id=tone_id, user_id=user_id)
        return group_id

    def update_group(self, user_id, group_id, title, description, tone_id):
        group = self.get_group(user_id, group_id)
        if group is None:
            return 0
        group.title, group.description, group.tone_id = title, description, tone_id
        return 1

    def delete_group(self, user_id, group_id):
        if self.get_group(user_id, group_id) is None:
            return 0
        del self.groups[group_id]
        return 1

    def list_tones(self, user_id):
        return [t for t in self.tones.values() if t.is_global or t.user_id == user_id]

    def get_group_with_tone(self, user_id, group_id):
        group = self.get_group(user_id, group_id)
        if group is None:
            return None
        tone = self.tones.get(group.tone_id) or ToneEntity(id=None, name='', stages=['1', '2', '3', '4'])
        return GroupDisplay(id=group.id, title=group.title, description=group.description,
                            tone_name=tone.name, stages=tone.stages)

    def list_group_links(self, user_id):
        return [GroupLink(id=g.id, title=g.title) for g in self.list_groups(user_id)]


class InMemoryGoalRepository(IGoalRepository):
    def __init__(self):
        self.goals = {}
        self._ids = itertools.count(1)

    def list_goals(self, group_id):
        return [g for g in self.goals.values() if g.group_id == group_id]

    def get_goal(self, group_id, goal_id):
        goal = self.goals.get(goal_id)
        return goal if goal and goal.group_id == group_id else None

    def create_goal(self, group_id, title, description, deadline, stage):
        goal_id = next(self._ids)
        self.goals[goal_id] = GoalEntity(id=goal_id, title=title, group_id=group_id, stage=stage,
                                         description=description, deadline=deadline)
        return goal_id

    def update_goal_fields(self, group_id, goal_id, title, description, deadline, stage):
        goal = self.get_goal(group_id, goal_id)
        if goal is None:
            return 0
        goal.title, goal.description, goal.deadline, goal.stage = title, description, deadline, stage
        return 1

    def update_goal_stage(self, goal_id, group_id, stage):
        goal = self.get_goal(group_id, goal_id)
        if goal is None:
            return 0
        goal.stage = stage
        return 1

    def delete_goal(self, group_id, goal_id):
        if self.get_goal(group_id, goal_id) is None:
            return 0
        del self.goals[goal_id]
        return 1


@pytest.fixture
def group_repo():
    return InMemoryGroupRepository(tones=[ToneEntity(id=1, name='Kanban', stages=['A', 'B', 'C', 'D'], is_global=True)])


@pytest.fixture
def goal_repo():
    return InMemoryGoalRepository()
