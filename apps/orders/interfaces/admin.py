"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import OrderModel, OrderItemModel


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    readonly_fields = (
        'id', 'product_id', 'product_name', 'size',
        'custom_name', 'custom_number', 'quantity', 'unit_price',
    )


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('order_number', 'customer_email', 'status', 'total', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('order_number', 'customer_email')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'order_number', 'created_at', 'updated_at')
    inlines = [OrderItemInline]
