# apps/goals/views.py
from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import Http404, HttpResponse
from django.views.decorators.http import require_http_methods

from apps.core.htmx import HxHeaderInfo, ResponseShape, attach_notification, render_negotiated, render_with_location, see_other
from apps.groups.adapters.orm_repositories import DjangoGroupRepository
from apps.groups.application.ownership import authorize_group_display, find_goal_in_group
from .adapters.orm_repositories import DjangoGoalRepository
from .application.use_cases import (
    GetBoardUseCase, CreateGoalUseCase, UpdateGoalUseCase, ChangeGoalStageUseCase, DeleteGoalUseCase,
)
from .domain.stages import InvalidStage, parse_stage, validate_stage_update
from .forms import GoalForm


def _bad_request(message) -> HttpResponse:
    return HttpResponse(f"Error: {message}", status=400)


def _find_goal(goals, goal_id):
    """Pełna strona: szukamy celu w już pobranej liście celów grupy."""
    goal = next((g for g in goals if g.id == goal_id), None)
    if goal is None:
        raise Http404("Goal not found")
    return goal


def _goal_builders(request, group_repo, goal_repo, group_id, pk):
    """Kontekst strony i fragmentu celu; każdy kształt autoryzuje grupę raz."""

    def build_page():
        board = GetBoardUseCase(group_repo, goal_repo).execute(request.user.id, group_id)
        return {
            'title': settings.SITE_TITLE,
            'group': board.group,
            'goal': _find_goal(board.goals, pk),
            'goals_in_stages': board.goals_in_stages,
            'group_links': group_repo.list_group_links(request.user.id),
        }

    def build_fragment():
        # Fragment: bezpośrednie zapytanie o cel
        group = authorize_group_display(group_repo, request.user.id, group_id)
        return {'group': group, 'goal': find_goal_in_group(goal_repo, group.id, pk)}

    return build_page, build_fragment


def _board_fragment(request, group_repo, goal_repo, group_id):
    """Odświeżona tablica po zmianie celu (htmx podmienia całą tablicę)."""
    board = GetBoardUseCase(group_repo, goal_repo).execute(request.user.id, group_id)
    return render_with_location(request, 'partials/group.html', {
        'group': board.group,
        'goals_in_stages': board.goals_in_stages,
    })


@require_http_methods(["GET", "POST"])
@login_required
def goal_create_view(request, group_id):
    group_repo = DjangoGroupRepository()
    goal_repo = DjangoGoalRepository()

    if request.method == "POST":
        form = GoalForm(request.POST)
        if not form.is_valid():
            return _bad_request(form.errors.as_text())

        input_dto = form.to_input()
        try:
            CreateGoalUseCase(group_repo, goal_repo).execute(request.user.id, group_id, input_dto)
        except ValueError as e:
            return _bad_request(e)

        if HxHeaderInfo.from_request(request).shape is ResponseShape.FRAGMENT:
            response = _board_fragment(request, group_repo, goal_repo, group_id)
        else:
            response = see_other('group_detail', pk=group_id)
        return attach_notification(response, f"Created {input_dto.title}", "Your goal has been created")

    # GET: ?stage= wybiera kolumnę, do której dodajemy cel
    try:
        selected_stage = validate_stage_update(parse_stage(request.GET.get('stage', 0)))
    except InvalidStage as e:
        return _bad_request(e)

    def build_page():
        board = GetBoardUseCase(group_repo, goal_repo).execute(request.user.id, group_id)
        return {
            'title': settings.SITE_TITLE,
            'group': board.group,
            'goals_in_stages': board.goals_in_stages,
            'selected_stage': selected_stage,
            'group_links': group_repo.list_group_links(request.user.id),
        }

    def build_fragment():
        group = authorize_group_display(group_repo, request.user.id, group_id)
        return {'group': group, 'selected_stage': selected_stage}

    return render_negotiated(
        request,
        'pages/new_goal.html', build_page,
        'partials/new_goal.html', build_fragment,
    )


@require_http_methods(["GET", "DELETE"])
@login_required
def goal_detail_view(request, group_id, pk):
    """GET: szczegóły celu. DELETE: usuwa cel."""
    group_repo = DjangoGroupRepository()
    goal_repo = DjangoGoalRepository()

    if request.method == "DELETE":
        DeleteGoalUseCase(group_repo, goal_repo).execute(request.user.id, group_id, pk)
        return attach_notification(HttpResponse(), "Goal deleted", "Your goal has been deleted")

    build_page, build_fragment = _goal_builders(request, group_repo, goal_repo, group_id, pk)
    return render_negotiated(
        request,
        'pages/goal.html', build_page,
        'partials/goal.html', build_fragment,
    )


@require_http_methods(["GET", "POST"])
@login_required
def goal_edit_view(request, group_id, pk):
    group_repo = DjangoGroupRepository()
    goal_repo = DjangoGoalRepository()

    if request.method == "POST":
        form = GoalForm(request.POST)
        if not form.is_valid():
            return _bad_request(form.errors.as_text())

        input_dto = form.to_input()
        try:
            UpdateGoalUseCase(group_repo, goal_repo).execute(request.user.id, group_id, pk, input_dto)
        except ValueError as e:
            return _bad_request(e)

        if HxHeaderInfo.from_request(request).shape is ResponseShape.FRAGMENT:
            response = _board_fragment(request, group_repo, goal_repo, group_id)
        else:
            response = see_other('group_detail', pk=group_id)
        return attach_notification(response, f"{input_dto.title} updated", "Your goal was updated")

    build_page, build_fragment = _goal_builders(request, group_repo, goal_repo, group_id, pk)
    return render_negotiated(
        request,
        'pages/edit_goal.html', build_page,
        'partials/edit_goal.html', build_fragment,
    )


@require_http_methods(["PATCH"])
@login_required
def goal_stage_view(request, group_id, pk):
    """Drag & drop na tablicy: tylko zapis etapu, bez renderowania fragmentu."""
    try:
        stage = parse_stage(request.GET.get('stage'))
        ChangeGoalStageUseCase(DjangoGroupRepository(), DjangoGoalRepository()).execute(
            request.user.id, group_id, pk, stage
        )
    except InvalidStage as e:
        return _bad_request(e)

    return attach_notification(HttpResponse(), "Goal moved", "The goal stage was updated")
