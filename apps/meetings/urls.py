# apps/meetings/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.meeting_collection_view, name='meeting_list'),
    path('stats/', views.meeting_stats_view, name='meeting_stats'),
    path('today/', views.meeting_today_view, name='meeting_today'),
    path('upcoming/', views.meeting_upcoming_view, name='meeting_upcoming'),
    path('<int:pk>/', views.meeting_detail_view, name='meeting_detail'),
]
