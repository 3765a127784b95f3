from django import forms
from .application.use_cases import GoalInput
from .domain.stages import MIN_STAGE, MAX_STAGE


class GoalForm(forms.Form):
    title = forms.CharField(max_length=200, widget=forms.TextInput(attrs={'class': 'input'}))
    description = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': 'input', 'rows': 3}))
    deadline = forms.DateField(required=False, widget=forms.DateInput(attrs={'class': 'input', 'type': 'date'}))
    # Ten sam zakres co przy PATCH .../stage
    stage = forms.IntegerField(min_value=MIN_STAGE, max_value=MAX_STAGE)

    def to_input(self) -> GoalInput:
        data = self.cleaned_data
        return GoalInput(
            title=data['title'],
            description=data.get('description') or "",
            deadline=data.get('deadline'),
            stage=data['stage'],
            keep_deadline='deadline' not in self.data,
        )
