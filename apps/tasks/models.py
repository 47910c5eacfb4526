# apps/tasks/models.py
from django.core.validators import MaxValueValidator
from django.db import models

from apps.core.domain.entities import Priority, choices_of
from apps.tasks.domain.entities import TaskStatus


class Task(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=choices_of(TaskStatus),
        default=TaskStatus.NEW.value
    )
    priority = models.CharField(max_length=10, choices=choices_of(Priority), default=Priority.MEDIUM.value)

    assigned_by = models.CharField(max_length=200)
    assigned_to = models.CharField(max_length=200)

    progress = models.PositiveIntegerField(default=0, validators=[MaxValueValidator(100)])
    due_date = models.DateTimeField(null=True, blank=True)

    # Powiazanie z Projektami (usuwanie projektu kasuje zadania w serwisie)
    project = models.ForeignKey(
        'projects.Project',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='tasks'
    )

    tags = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['status', 'created_at'], name='task_status_created_idx'),
        ]

    def __str__(self):
        return self.title
