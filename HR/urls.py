"""
HR App - Main URL Configuration
Routes URLs to the sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    path('person/', include('HR.person.urls')),
]
