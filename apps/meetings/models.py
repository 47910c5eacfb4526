# apps/meetings/models.py
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.domain.entities import Priority, choices_of
from apps.core.forms import time_of_day_validator
from apps.meetings.domain.entities import MeetingStatus, MeetingType


class Meeting(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    meeting_date = models.DateTimeField()
    start_time = models.CharField(max_length=5, validators=[time_of_day_validator('Invalid start time format (HH:MM)')])
    end_time = models.CharField(max_length=5, validators=[time_of_day_validator('Invalid end time format (HH:MM)')])
    duration = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text="Minuty")

    location = models.CharField(max_length=255, blank=True)
    meeting_type = models.CharField(
        max_length=20,
        choices=choices_of(MeetingType),
        default=MeetingType.IN_PERSON.value
    )
    meeting_link = models.CharField(max_length=500, blank=True)
    organizer = models.CharField(max_length=200)

    # [{name, email, status}]
    participants = models.JSONField(default=list, blank=True)
    agenda = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=choices_of(MeetingStatus),
        default=MeetingStatus.SCHEDULED.value
    )
    priority = models.CharField(max_length=10, choices=choices_of(Priority), default=Priority.MEDIUM.value)

    project = models.ForeignKey(
        'projects.Project',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='meetings'
    )
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.meeting_date:%Y-%m-%d} {self.start_time})"
