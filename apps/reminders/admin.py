from django.contrib import admin
from .models import Reminder


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    list_display = ('title', 'reminder_date', 'reminder_time', 'category', 'status', 'is_recurring')
    list_filter = ('status', 'category', 'is_recurring')
    search_fields = ('title',)
