"""
Admin dashboard API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.dashboard.interfaces.api.v1.urls')),
]
