from django.apps import AppConfig

class TonesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tones'
    label = 'tones'
