# apps/tones/models.py
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

STAGE_LABEL_COUNT = 4


def default_stages():
    return ['To Do', 'In Progress', 'Review', 'Done']


class ToneQuerySet(models.QuerySet):
    def eligible_for(self, user_id):
        """Globalne tony + tony należące do użytkownika."""
        return self.filter(Q(is_global=True) | Q(user_id=user_id))


class Tone(models.Model):
    # Jak traktować terminy celów w grupie
    class DeadlineMode(models.TextChoices):
        OFF = 'off', 'No deadlines'
        SOFT = 'soft', 'Soft deadlines'
        HARD = 'hard', 'Hard deadlines'

    # Co zrobić z celem, którego termin minął
    class UnmetBehavior(models.TextChoices):
        NOTHING = 'nothing', 'Do nothing'
        ARCHIVE = 'archive', 'Move to the overflow stage'
        DELETE = 'delete', 'Delete the goal'

    name = models.CharField(max_length=100)
    stages = models.JSONField(default=default_stages, help_text="Dokładnie 4 etykiety kolumn tablicy")
    deadline = models.CharField(max_length=10, choices=DeadlineMode.choices, default=DeadlineMode.SOFT)
    is_global = models.BooleanField(default=False)
    greeting = models.CharField(max_length=200, blank=True)
    unmet_behavior = models.CharField(max_length=10, choices=UnmetBehavior.choices, default=UnmetBehavior.NOTHING)

    # Brak właściciela = ton globalny
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.CASCADE,
        related_name='tones'
    )

    objects = ToneQuerySet.as_manager()

    class Meta:
        ordering = ['id']

    def clean(self):
        if not isinstance(self.stages, list) or len(self.stages) != STAGE_LABEL_COUNT:
            raise ValidationError({'stages': f"A tone needs exactly {STAGE_LABEL_COUNT} stage labels."})
        if not all(isinstance(label, str) and label for label in self.stages):
            raise ValidationError({'stages': "Stage labels must be non-empty strings."})
        if not self.is_global and self.user_id is None:
            raise ValidationError({'user': "A private tone needs an owner."})

    def __str__(self):
        return self.name
