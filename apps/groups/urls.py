from django.urls import path
from . import views

urlpatterns = [
    path('new', views.group_create_view, name='group_create'),
    path('<int:pk>', views.group_detail_view, name='group_detail'),   # GET tablica, DELETE usuwa
    path('<int:pk>/edit', views.group_edit_view, name='group_edit'),
]
