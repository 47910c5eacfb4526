#apps/tasks/forms.py
from apps.core.forms import EntityForm, clean_string_list
from .models import Task


class TaskForm(EntityForm):
    json_list_fields = ('tags',)

    class Meta:
        model = Task
        fields = [
            'title', 'description', 'status', 'priority', 'assigned_by', 'assigned_to',
            'progress', 'due_date', 'project', 'tags',
        ]
        error_messages = {
            'title': {'required': 'Title is required'},
            'assigned_by': {'required': 'Assigned by is required'},
            'assigned_to': {'required': 'Assigned to is required'},
            'status': {'invalid_choice': 'Invalid status'},
            'priority': {'invalid_choice': 'Invalid priority'},
            'progress': {
                'invalid': 'Progress must be between 0 and 100',
                'min_value': 'Progress must be between 0 and 100',
                'max_value': 'Progress must be between 0 and 100',
            },
            'due_date': {'invalid': 'Invalid due date format'},
            'project': {'invalid_choice': 'Project not found'},
        }

    def clean_tags(self):
        return clean_string_list(self.cleaned_data.get('tags'), 'Tags')
