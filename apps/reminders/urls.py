# apps/reminders/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.reminder_collection_view, name='reminder_list'),
    path('stats/', views.reminder_stats_view, name='reminder_stats'),
    path('upcoming/', views.reminder_upcoming_view, name='reminder_upcoming'),
    path('<int:pk>/', views.reminder_detail_view, name='reminder_detail'),
]
