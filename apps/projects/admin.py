from django.contrib import admin
from .models import Milestone, Project


class MilestoneInline(admin.TabularInline):
    model = Milestone
    extra = 1
    fields = ('title', 'due_date', 'status', 'completed_date')


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('name', 'status', 'priority', 'progress', 'project_manager', 'start_date', 'expected_end_date')
    list_filter = ('status', 'priority')
    search_fields = ('name', 'project_manager')
    inlines = [MilestoneInline]
