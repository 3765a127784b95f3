from django import forms
from apps.tones.models import Tone
from .application.use_cases import GroupInput


class GroupForm(forms.Form):
    title = forms.CharField(max_length=200, widget=forms.TextInput(attrs={'class': 'input'}))
    description = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': 'input', 'rows': 3}))
    tone_id = forms.ModelChoiceField(queryset=Tone.objects.none(), widget=forms.Select(attrs={'class': 'input'}))

    def __init__(self, user_id, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Tylko tony globalne i własne (żeby nie użył cudzego)
        self.fields['tone_id'].queryset = Tone.objects.eligible_for(user_id)

    def to_input(self, user_id) -> GroupInput:
        data = self.cleaned_data
        return GroupInput(
            title=data['title'],
            description=data.get('description') or "",
            tone_id=data['tone_id'].id,
            user_id=user_id,
        )
