# apps/projects/forms.py
from django import forms

from apps.core.forms import (
    EntityForm, clean_object_list, clean_string_list, optional_email, require_text, stamp_if_missing,
)
from .models import Milestone, Project


def _number(value, message):
    if isinstance(value, bool):
        raise forms.ValidationError(message)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise forms.ValidationError(message)


class ProjectForm(EntityForm):
    json_list_fields = ('team_members', 'tags', 'documents')

    class Meta:
        model = Project
        fields = [
            'name', 'description', 'status', 'progress', 'priority',
            'start_date', 'end_date', 'expected_end_date',
            'budget', 'team_members', 'project_manager', 'client', 'tags', 'documents',
        ]
        error_messages = {
            'name': {'required': 'Project name is required'},
            'project_manager': {'required': 'Project manager is required'},
            'start_date': {
                'required': 'Valid start date is required',
                'invalid': 'Valid start date is required',
            },
            'end_date': {'invalid': 'Invalid end date format'},
            'expected_end_date': {'invalid': 'Invalid expected end date format'},
            'progress': {
                'invalid': 'Progress must be between 0 and 100',
                'min_value': 'Progress must be between 0 and 100',
                'max_value': 'Progress must be between 0 and 100',
            },
        }

    def clean_budget(self):
        budget = self.cleaned_data.get('budget') or {}
        if not isinstance(budget, dict):
            raise forms.ValidationError('Budget must be an object')
        return {
            'allocated': _number(budget.get('allocated', 0), 'Allocated budget must be a number'),
            'spent': _number(budget.get('spent', 0), 'Spent budget must be a number'),
        }

    def clean_team_members(self):
        def clean_member(member, index):
            require_text(member, 'name', 'Team member name is required')
            require_text(member, 'role', 'Team member role is required')
            optional_email(member, 'email', 'Invalid team member email')
            stamp_if_missing(member, 'joinedDate')
            return member

        # Panel wysyła członków jako same nazwiska
        return clean_object_list(self.cleaned_data.get('team_members'), 'Team members',
                                 clean_member, shorthand_key='name')

    def clean_client(self):
        client = self.cleaned_data.get('client')
        if client in (None, '', {}):
            return None
        if not isinstance(client, dict):
            raise forms.ValidationError('Client must be an object')
        optional_email(client, 'email', 'Invalid client email')
        return {key: client.get(key) for key in ('name', 'email', 'company') if key in client}

    def clean_tags(self):
        return clean_string_list(self.cleaned_data.get('tags'), 'Tags')

    def clean_documents(self):
        def clean_document(document, index):
            require_text(document, 'name', 'Document name is required')
            stamp_if_missing(document, 'uploadDate')
            return document

        return clean_object_list(self.cleaned_data.get('documents'), 'Documents', clean_document)


class MilestoneForm(EntityForm):
    class Meta:
        model = Milestone
        fields = ['title', 'description', 'due_date', 'status', 'completed_date']
        error_messages = {
            'title': {'required': 'Milestone title is required'},
            'due_date': {'invalid': 'Invalid due date format'},
        }
