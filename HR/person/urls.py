"""
URL configuration for the People Roster.
"""
from django.urls import path

from . import views

app_name = 'person'

urlpatterns = [
    path('', views.person_list, name='person_list'),
    path('all/', views.person_list, name='person_list_all'),
    path('by-name/', views.person_by_name, name='person_by_name'),
    path('<int:pk>/', views.person_detail, name='person_detail'),
]
