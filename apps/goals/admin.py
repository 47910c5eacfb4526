from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'status', 'current_value', 'target_value', 'unit', 'target_date')
    list_filter = ('status', 'category', 'priority')
    search_fields = ('title',)
