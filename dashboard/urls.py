"""
Dashboard API URLs
"""

from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('summary/', views.dashboard_summary, name='summary'),
]
