"""
Admin dashboard API v1 URLs.
"""
from django.urls import path

from .views import SalesStatsView, SystemEventListView, SystemStatusView

urlpatterns = [
    path('events/', SystemEventListView.as_view(), name='dashboard-events'),
    path('stats/sales/', SalesStatsView.as_view(), name='dashboard-sales-stats'),
    path('stats/system/', SystemStatusView.as_view(), name='dashboard-system-stats'),
]
