# apps/goals/forms.py
from django import forms

from apps.core.forms import EntityForm, clean_object_list, clean_string_list, require_text
from .models import Goal


class GoalForm(EntityForm):
    json_list_fields = ('tags', 'milestones')

    class Meta:
        model = Goal
        fields = [
            'title', 'description', 'target_value', 'current_value', 'unit', 'category',
            'priority', 'status', 'start_date', 'target_date', 'completed_date',
            'color', 'tags', 'milestones',
        ]
        error_messages = {
            'title': {'required': 'Title is required'},
            'target_value': {
                'required': 'Target value must be a positive number',
                'invalid': 'Target value must be a positive number',
                'min_value': 'Target value must be a positive number',
            },
            'current_value': {
                'invalid': 'Current value must be a positive number',
                'min_value': 'Current value must be a positive number',
            },
            'start_date': {
                'required': 'Valid start date is required',
                'invalid': 'Valid start date is required',
            },
            'target_date': {
                'required': 'Valid target date is required',
                'invalid': 'Valid target date is required',
            },
            'completed_date': {'invalid': 'Invalid completed date format'},
            'category': {'invalid_choice': 'Invalid category'},
            'priority': {'invalid_choice': 'Invalid priority'},
            'status': {'invalid_choice': 'Invalid status'},
        }

    def clean_tags(self):
        return clean_string_list(self.cleaned_data.get('tags'), 'Tags')

    def clean_milestones(self):
        def clean_milestone(milestone, index):
            require_text(milestone, 'title', 'Milestone title is required')
            target = milestone.get('targetValue')
            if target is not None and (isinstance(target, bool) or not isinstance(target, (int, float))):
                raise forms.ValidationError('Milestone target value must be a number')
            milestone.setdefault('isAchieved', False)
            if not isinstance(milestone['isAchieved'], bool):
                raise forms.ValidationError('Milestone isAchieved must be a boolean')
            return milestone

        return clean_object_list(self.cleaned_data.get('milestones'), 'Milestones', clean_milestone)
