"""
Contact and newsletter API v1 URLs.
"""
from django.urls import path

from .views import ContactView, SubscribeView

urlpatterns = [
    path('contact/', ContactView.as_view(), name='contact'),
    path('subscribe/', SubscribeView.as_view(), name='subscribe'),
]
