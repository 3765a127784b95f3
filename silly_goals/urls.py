# silly_goals/urls.py
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from apps.groups import views as group_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('django.contrib.auth.urls')),
    path('', RedirectView.as_view(url='/dashboard', permanent=False), name='home'),  # Pusta ścieżka = Dashboard
    path('dashboard', group_views.dashboard_view, name='dashboard'),
    # Grupy i cele (cele zagnieżdżone pod grupą):
    path('groups/', include('apps.groups.urls')),
    path('groups/<int:group_id>/goals/', include('apps.goals.urls')),
]
