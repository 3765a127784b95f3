from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'group', 'stage', 'deadline')
    list_filter = ('stage',)
    search_fields = ('title', 'description')
