from django.urls import path
from . import views

urlpatterns = [
    path('', views.project_collection_view, name='project_list'),
    path('stats/', views.project_stats_view, name='project_stats'),
    path('<int:pk>/', views.project_detail_view, name='project_detail'),
    path('<int:pk>/progress/', views.project_progress_view, name='project_progress'),
    path('<int:pk>/milestones/', views.milestone_create_view, name='milestone_create'),
    path('<int:project_id>/milestones/<int:milestone_id>/', views.milestone_update_view, name='milestone_update'),
]
