"""Use case rules against in-memory repositories (no database)."""
from datetime import date

import pytest
from django.http import Http404

from apps.goals.application.use_cases import (
    ChangeGoalStageUseCase, CreateGoalUseCase, DeleteGoalUseCase, GetBoardUseCase, GoalInput, UpdateGoalUseCase,
)
from apps.goals.domain.stages import InvalidStage
from apps.groups.application.ownership import authorize_goal, authorize_group
from apps.groups.application.use_cases import CreateGroupUseCase, DeleteGroupUseCase, GroupInput, UpdateGroupUseCase

ALICE, BOB = 1, 2


@pytest.fixture
def alice_group(group_repo):
    return CreateGroupUseCase(group_repo).execute(GroupInput(title='Fitness', tone_id=1, user_id=ALICE))


class TestGroupUseCases:
    def test_create_requires_title(self, group_repo):
        with pytest.raises(ValueError):
            CreateGroupUseCase(group_repo).execute(GroupInput(title='  ', tone_id=1, user_id=ALICE))

    def test_update_by_owner(self, group_repo, alice_group):
        UpdateGroupUseCase(group_repo).execute(alice_group, GroupInput(title='Running', tone_id=1, user_id=ALICE))
        assert group_repo.get_group(ALICE, alice_group).title == 'Running'

    def test_other_user_cannot_update_or_delete(self, group_repo, alice_group):
        with pytest.raises(Http404):
            UpdateGroupUseCase(group_repo).execute(alice_group, GroupInput(title='Mine', tone_id=1, user_id=BOB))
        with pytest.raises(Http404):
            DeleteGroupUseCase(group_repo).execute(BOB, alice_group)

        assert group_repo.get_group(ALICE, alice_group).title == 'Fitness'

    def test_delete_returns_deleted_group(self, group_repo, alice_group):
        deleted = DeleteGroupUseCase(group_repo).execute(ALICE, alice_group)
        assert deleted.title == 'Fitness'
        with pytest.raises(Http404):
            authorize_group(group_repo, ALICE, alice_group)


class TestGoalUseCases:
    def test_create_then_read_back(self, group_repo, goal_repo, alice_group):
        goal_id = CreateGoalUseCase(group_repo, goal_repo).execute(ALICE, alice_group, GoalInput(title='T', stage=2))

        goal = authorize_goal(group_repo, goal_repo, ALICE, alice_group, goal_id)
        assert (goal.title, goal.stage) == ('T', 2)

    def test_create_rejects_out_of_range_stage(self, group_repo, goal_repo, alice_group):
        with pytest.raises(InvalidStage):
            CreateGoalUseCase(group_repo, goal_repo).execute(ALICE, alice_group, GoalInput(title='T', stage=7))
        assert goal_repo.goals == {}

    def test_create_in_foreign_group(self, group_repo, goal_repo, alice_group):
        with pytest.raises(Http404):
            CreateGoalUseCase(group_repo, goal_repo).execute(BOB, alice_group, GoalInput(title='T'))

    def test_update_missing_goal(self, group_repo, goal_repo, alice_group):
        with pytest.raises(Http404):
            UpdateGoalUseCase(group_repo, goal_repo).execute(ALICE, alice_group, 42, GoalInput(title='T'))

    def test_update_can_keep_stored_deadline(self, group_repo, goal_repo, alice_group):
        goal_id = goal_repo.create_goal(alice_group, 'T', '', date(2030, 1, 1), 0)

        UpdateGoalUseCase(group_repo, goal_repo).execute(
            ALICE, alice_group, goal_id, GoalInput(title='Renamed', stage=2, keep_deadline=True)
        )

        goal = goal_repo.get_goal(alice_group, goal_id)
        assert (goal.title, goal.stage, goal.deadline) == ('Renamed', 2, date(2030, 1, 1))

    @pytest.mark.parametrize('start, target', [(0, 3), (3, 0), (2, 4), (4, 1), (1, 1)])
    def test_any_stage_reachable_from_any_other(self, group_repo, goal_repo, alice_group, start, target):
        goal_id = goal_repo.create_goal(alice_group, 'T', '', None, start)

        ChangeGoalStageUseCase(group_repo, goal_repo).execute(ALICE, alice_group, goal_id, target)

        assert goal_repo.get_goal(alice_group, goal_id).stage == target

    @pytest.mark.parametrize('stage', [-1, 5])
    def test_stage_change_out_of_range_keeps_stored_stage(self, group_repo, goal_repo, alice_group, stage):
        goal_id = goal_repo.create_goal(alice_group, 'T', '', None, 1)

        with pytest.raises(InvalidStage):
            ChangeGoalStageUseCase(group_repo, goal_repo).execute(ALICE, alice_group, goal_id, stage)

        assert goal_repo.get_goal(alice_group, goal_id).stage == 1

    def test_stage_change_checks_group_owner_first(self, group_repo, goal_repo, alice_group):
        goal_id = goal_repo.create_goal(alice_group, 'T', '', None, 1)
        with pytest.raises(Http404):
            ChangeGoalStageUseCase(group_repo, goal_repo).execute(BOB, alice_group, goal_id, 9)

    def test_stage_change_goal_from_another_group(self, group_repo, goal_repo, alice_group):
        other_group = group_repo.create_group(ALICE, 'Other', '', 1)
        goal_id = goal_repo.create_goal(other_group, 'T', '', None, 1)

        with pytest.raises(Http404):
            ChangeGoalStageUseCase(group_repo, goal_repo).execute(ALICE, alice_group, goal_id, 2)
        assert goal_repo.get_goal(other_group, goal_id).stage == 1

    def test_delete_goal(self, group_repo, goal_repo, alice_group):
        goal_id = goal_repo.create_goal(alice_group, 'T', '', None, 0)
        DeleteGoalUseCase(group_repo, goal_repo).execute(ALICE, alice_group, goal_id)

        with pytest.raises(Http404):
            DeleteGoalUseCase(group_repo, goal_repo).execute(ALICE, alice_group, goal_id)

    def test_board(self, group_repo, goal_repo, alice_group):
        for title, stage in [('a', 0), ('b', 1), ('c', 1), ('d', 3), ('e', 4)]:
            goal_repo.create_goal(alice_group, title, '', None, stage)

        board = GetBoardUseCase(group_repo, goal_repo).execute(ALICE, alice_group)

        assert board.group.stages == ['A', 'B', 'C', 'D']
        assert len(board.goals) == 5
        assert [[g.title for g in bucket] for bucket in board.goals_in_stages] == [['a'], ['b', 'c'], [], ['d']]
