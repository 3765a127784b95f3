import django_filters
from django import forms
from .models import Group


class GroupFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Title contains",
        widget=forms.TextInput(attrs={'placeholder': 'Search...'})
    )
    # Filtr po ID tonu - queryset jest już zawężony do właściciela
    tone = django_filters.NumberFilter(field_name='tone_id', label="Tone")

    class Meta:
        model = Group
        fields = ['title', 'tone']
