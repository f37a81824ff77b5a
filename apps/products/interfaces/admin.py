"""
Products admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.product_model import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'team', 'category', 'price', 'stock', 'featured', 'created_at')
    list_filter = ('featured', 'category', 'team')
    search_fields = ('name', 'team', 'product_number', 'description')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
