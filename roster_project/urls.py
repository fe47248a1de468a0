"""
URL configuration for roster_project.

All roster endpoints live under /api/.
"""
from django.urls import path, include

urlpatterns = [
    path('api/', include('HR.urls')),
]
