from django.contrib import admin
from .models import Group


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'tone', 'created_at')
    list_filter = ('tone',)
    search_fields = ('title', 'description')
