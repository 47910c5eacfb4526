# apps/projects/models.py
from django.core.validators import MaxValueValidator
from django.db import models

from apps.core.domain.entities import Priority, choices_of
from apps.projects.domain.entities import MilestoneStatus, ProjectStatus


def default_budget():
    return {'allocated': 0, 'spent': 0}


class Project(models.Model):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=choices_of(ProjectStatus),
        default=ProjectStatus.PLANNING.value
    )
    progress = models.PositiveIntegerField(default=0, validators=[MaxValueValidator(100)])
    priority = models.CharField(max_length=10, choices=choices_of(Priority), default=Priority.MEDIUM.value)

    # Czas
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    expected_end_date = models.DateTimeField(null=True, blank=True)

    # {allocated, spent}
    budget = models.JSONField(default=default_budget, blank=True)
    # [{name, role, email, joinedDate}]
    team_members = models.JSONField(default=list, blank=True)
    project_manager = models.CharField(max_length=200)
    # {name, email, company}
    client = models.JSONField(null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)
    # [{name, url, uploadDate}]
    documents = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name


class Milestone(models.Model):
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='milestones')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    due_date = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=choices_of(MilestoneStatus),
        default=MilestoneStatus.PENDING.value
    )
    completed_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
