# apps/goals/models.py
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from apps.goals.domain.stages import MIN_STAGE, MAX_STAGE


class Goal(models.Model):
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='goals')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    deadline = models.DateField(null=True, blank=True)
    stage = models.SmallIntegerField(
        default=0,
        validators=[MinValueValidator(MIN_STAGE), MaxValueValidator(MAX_STAGE)],
        help_text="0-3 kolumny tablicy, 4 = poza tablicą"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
