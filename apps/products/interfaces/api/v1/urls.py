"""
Products API v1 URLs.
"""
from django.urls import path

from .views import ProductListCreateView, ProductDetailView

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list-create'),
    path('<uuid:product_id>/', ProductDetailView.as_view(), name='product-detail'),
]
