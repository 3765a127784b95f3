from django import template
from apps.goals.domain import stages

register = template.Library()

# Czyste funkcje z modelu etapów, wystawione jako filtry szablonów
register.filter('stage_color', stages.stage_color)
register.filter('stage_color_light', stages.stage_color_light)
register.filter('stage_border_light', stages.stage_border_light)
register.filter('stage_text', stages.stage_text)
