"""
Contact and newsletter API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.outreach.interfaces.api.v1.urls')),
]
