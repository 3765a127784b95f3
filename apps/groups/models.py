# apps/groups/models.py
from django.db import models
from django.conf import settings


class Group(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goal_groups')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # Ton nie może zniknąć, dopóki używa go jakaś grupa
    tone = models.ForeignKey(
        'tones.Tone',
        on_delete=models.PROTECT,
        related_name='groups'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
