# apps/reports/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('dashboard/', views.dashboard_view, name='analytics_dashboard'),
    path('productivity/', views.productivity_view, name='analytics_productivity'),
]
