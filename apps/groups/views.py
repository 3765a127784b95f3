# apps/groups/views.py
from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.htmx import (
    HxHeaderInfo, ResponseShape, attach_notification, render_negotiated, render_with_location, see_other,
)
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.application.use_cases import GetBoardUseCase
from .adapters.orm_repositories import DjangoGroupRepository
from .application.ownership import authorize_group
from .application.use_cases import CreateGroupUseCase, UpdateGroupUseCase, DeleteGroupUseCase
from .forms import GroupForm


def _form_error(form) -> HttpResponse:
    return HttpResponse(f"Error: {form.errors.as_text()}", status=400)


@require_GET
@login_required
def dashboard_view(request):
    """Lista grup użytkownika (opcjonalnie filtrowana po tytule/tonie)."""
    repo = DjangoGroupRepository()
    groups = repo.list_groups(request.user.id, criteria=request.GET)

    return render_negotiated(
        request,
        'pages/dashboard.html', lambda: {
            'title': settings.SITE_TITLE,
            'groups': groups,
            'group_links': repo.list_group_links(request.user.id),
            'search': request.GET.get('title', ''),
        },
        'partials/dashboard.html', lambda: {
            'groups': groups,
            'search': request.GET.get('title', ''),
        },
    )


@require_http_methods(["GET", "POST"])
@login_required
def group_create_view(request):
    repo = DjangoGroupRepository()

    if request.method == "POST":
        form = GroupForm(request.user.id, request.POST)
        if not form.is_valid():
            return _form_error(form)

        input_dto = form.to_input(request.user.id)
        use_case = CreateGroupUseCase(repository=repo)
        try:
            group_id = use_case.execute(input_dto)
        except ValueError as e:
            return HttpResponse(f"Error: {e}", status=400)

        # Zawsze przekierowanie na stronę nowej grupy
        response = see_other('group_detail', pk=group_id)
        return attach_notification(response, f"Created {input_dto.title}", "New Group Created!")

    # GET: formularz z tonami do wyboru
    tones = repo.list_tones(request.user.id)
    return render_negotiated(
        request,
        'pages/new_group.html', lambda: {
            'title': settings.SITE_TITLE,
            'tones': tones,
            'group_links': repo.list_group_links(request.user.id),
        },
        'partials/new_group.html', lambda: {'tones': tones},
    )


@require_http_methods(["GET", "POST"])
@login_required
def group_edit_view(request, pk):
    repo = DjangoGroupRepository()

    if request.method == "POST":
        form = GroupForm(request.user.id, request.POST)
        if not form.is_valid():
            return _form_error(form)

        input_dto = form.to_input(request.user.id)
        use_case = UpdateGroupUseCase(repository=repo)
        try:
            use_case.execute(pk, input_dto)
        except ValueError as e:
            return HttpResponse(f"Error: {e}", status=400)

        if HxHeaderInfo.from_request(request).shape is ResponseShape.FRAGMENT:
            response = render_with_location(request, 'partials/dashboard.html', {
                'groups': repo.list_groups(request.user.id),
            })
        else:
            response = see_other('dashboard')
        return attach_notification(response, f"{input_dto.title} Updated", "Your group has been updated")

    # GET: formularz wypełniony danymi grupy (404 jeśli nie twoja)
    group = authorize_group(repo, request.user.id, pk)
    tones = repo.list_tones(request.user.id)
    return render_negotiated(
        request,
        'pages/edit_group.html', lambda: {
            'title': settings.SITE_TITLE,
            'group': group,
            'tones': tones,
            'group_links': repo.list_group_links(request.user.id),
        },
        'partials/edit_group.html', lambda: {'group': group, 'tones': tones},
    )


@require_http_methods(["GET", "DELETE"])
@login_required
def group_detail_view(request, pk):
    """GET: tablica celów grupy. DELETE: usuwa grupę razem z celami."""
    repo = DjangoGroupRepository()

    if request.method == "DELETE":
        group = DeleteGroupUseCase(repository=repo).execute(request.user.id, pk)
        return attach_notification(HttpResponse(), f"Deleted {group.title}", "Your group and its goals are gone")

    board = GetBoardUseCase(repo, DjangoGoalRepository()).execute(request.user.id, pk)
    return render_negotiated(
        request,
        'pages/group.html', lambda: {
            'title': settings.SITE_TITLE,
            'group': board.group,
            'goals_in_stages': board.goals_in_stages,
            'group_links': repo.list_group_links(request.user.id),
        },
        'partials/group.html', lambda: {
            'group': board.group,
            'goals_in_stages': board.goals_in_stages,
        },
    )
