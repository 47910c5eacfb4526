# apps/goals/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.goal_collection_view, name='goal_list'),
    path('stats/', views.goal_stats_view, name='goal_stats'),
    path('<int:pk>/', views.goal_detail_view, name='goal_detail'),
    path('<int:pk>/progress/', views.goal_progress_view, name='goal_progress'),
]
