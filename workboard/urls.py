# workboard/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('apps.core.urls')),  # health check
    # Zasoby REST:
    path('api/tasks/', include('apps.tasks.urls')),
    path('api/projects/', include('apps.projects.urls')),
    path('api/meetings/', include('apps.meetings.urls')),
    path('api/reminders/', include('apps.reminders.urls')),
    path('api/goals/', include('apps.goals.urls')),
    path('api/analytics/', include('apps.reports.urls')),
]
