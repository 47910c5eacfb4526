# apps/goals/models.py
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

from apps.core.domain.entities import Priority, choices_of
from apps.goals.domain.entities import GoalCategory, GoalStatus


class Goal(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    target_value = models.FloatField(validators=[MinValueValidator(0)])
    current_value = models.FloatField(default=0, validators=[MinValueValidator(0)])
    unit = models.CharField(max_length=50, default='units')

    category = models.CharField(
        max_length=20,
        choices=choices_of(GoalCategory),
        default=GoalCategory.WORK.value
    )
    priority = models.CharField(max_length=10, choices=choices_of(Priority), default=Priority.MEDIUM.value)
    status = models.CharField(
        max_length=20,
        choices=choices_of(GoalStatus),
        default=GoalStatus.ACTIVE.value
    )

    start_date = models.DateTimeField()
    target_date = models.DateTimeField()
    completed_date = models.DateTimeField(null=True, blank=True)

    color = models.CharField(
        max_length=7,
        default='#10b981',
        validators=[RegexValidator(r'^#[0-9a-fA-F]{6}$', 'Color must be a hex value like #10b981')]
    )
    tags = models.JSONField(default=list, blank=True)
    # [{title, targetValue, achievedDate, isAchieved}]
    milestones = models.JSONField(default=list, blank=True)

    # progress i isOverdue liczone przy odczycie (apps.core.domain.derived)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.current_value}/{self.target_value} {self.unit})"
