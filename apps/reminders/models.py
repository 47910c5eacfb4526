# apps/reminders/models.py
from django.db import models

from apps.core.domain.entities import Priority, choices_of
from apps.core.forms import time_of_day_validator
from apps.reminders.domain.entities import RecurringType, ReminderCategory, ReminderStatus


class Reminder(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    reminder_date = models.DateTimeField()
    reminder_time = models.CharField(max_length=5, validators=[time_of_day_validator()])

    status = models.CharField(
        max_length=20,
        choices=choices_of(ReminderStatus),
        default=ReminderStatus.PENDING.value
    )
    priority = models.CharField(max_length=10, choices=choices_of(Priority), default=Priority.MEDIUM.value)
    category = models.CharField(
        max_length=20,
        choices=choices_of(ReminderCategory),
        default=ReminderCategory.PERSONAL.value
    )

    is_recurring = models.BooleanField(default=False)
    # Wymagane tylko gdy is_recurring (sprawdza ReminderForm.clean)
    recurring_type = models.CharField(max_length=10, choices=choices_of(RecurringType), null=True, blank=True)
    notification_sent = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [models.Index(fields=['status', 'reminder_date'], name='reminder_status_date_idx')]

    def __str__(self):
        return f"{self.title} @ {self.reminder_date:%Y-%m-%d} {self.reminder_time}"
