from django.urls import path
from . import views

urlpatterns = [
    path('new', views.goal_create_view, name='goal_create'),
    path('<int:pk>', views.goal_detail_view, name='goal_detail'),   # GET szczegóły, DELETE usuwa
    path('<int:pk>/edit', views.goal_edit_view, name='goal_edit'),
    path('<int:pk>/stage', views.goal_stage_view, name='goal_stage'),
]
