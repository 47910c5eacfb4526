from django.contrib import admin
from .models import Meeting


@admin.register(Meeting)
class MeetingAdmin(admin.ModelAdmin):
    list_display = ('title', 'meeting_date', 'start_time', 'end_time', 'organizer', 'status', 'project')
    list_filter = ('status', 'meeting_type', 'priority')
    search_fields = ('title', 'organizer', 'location')
    date_hierarchy = 'meeting_date'
