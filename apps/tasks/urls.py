# apps/tasks/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.task_collection_view, name='task_list'),       # to obsługuje /api/tasks/
    path('stats/', views.task_stats_view, name='task_stats'),
    path('<int:pk>/', views.task_detail_view, name='task_detail'),
]
