# apps/reminders/forms.py
from apps.core.forms import EntityForm
from .models import Reminder


class ReminderForm(EntityForm):
    class Meta:
        model = Reminder
        fields = [
            'title', 'description', 'reminder_date', 'reminder_time', 'status', 'priority',
            'category', 'is_recurring', 'recurring_type', 'notification_sent',
        ]
        error_messages = {
            'title': {'required': 'Title is required'},
            'reminder_date': {
                'required': 'Valid reminder date is required',
                'invalid': 'Valid reminder date is required',
            },
            'reminder_time': {'required': 'Invalid time format (HH:MM)'},
            'status': {'invalid_choice': 'Invalid status'},
            'priority': {'invalid_choice': 'Invalid priority'},
            'category': {'invalid_choice': 'Invalid category'},
            'recurring_type': {'invalid_choice': 'Invalid recurring type'},
        }

    def clean(self):
        cleaned = super().clean()
        if cleaned.get('is_recurring') and not cleaned.get('recurring_type') \
                and 'recurring_type' not in self.errors:
            self.add_error('recurring_type', 'Recurring type is required for recurring reminders')
        return cleaned
