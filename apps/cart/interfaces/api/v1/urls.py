"""
Cart API v1 URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CartItemView,
    CartItemDecrementView,
    CartToggleView,
    CartOpenView,
    CartCloseView,
)

urlpatterns = [
    path('', CartView.as_view(), name='cart'),
    path('items/', CartItemView.as_view(), name='cart-items'),
    path('items/decrement/', CartItemDecrementView.as_view(), name='cart-items-decrement'),
    path('toggle/', CartToggleView.as_view(), name='cart-toggle'),
    path('open/', CartOpenView.as_view(), name='cart-open'),
    path('close/', CartCloseView.as_view(), name='cart-close'),
]
