"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import OrderListCreateView, OrderDetailView, OrderStatusView

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<uuid:order_id>/status/', OrderStatusView.as_view(), name='order-status'),
]
