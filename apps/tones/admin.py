from django.contrib import admin
from .models import Tone


@admin.register(Tone)
class ToneAdmin(admin.ModelAdmin):
    list_display = ('name', 'is_global', 'user', 'deadline', 'unmet_behavior')
    list_filter = ('is_global', 'deadline', 'unmet_behavior')
    search_fields = ('name', 'greeting')
