"""
Order Django ORM models.
"""
import uuid

from django.db import models

from ...domain.value_objects.order_status import OrderStatus


class OrderModel(models.Model):
    """Order model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.PAID.value,
        db_index=True,
    )
    total = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    # Customer details as entered at checkout
    customer_email = models.EmailField(blank=True, default='', db_index=True)
    customer = models.JSONField(default=dict)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'orders'
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number


class OrderItemModel(models.Model):
    """Order item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='items')
    # Denormalized so catalog deletions leave order history intact.
    product_id = models.CharField(max_length=64, db_index=True)
    product_name = models.CharField(max_length=255)
    size = models.CharField(max_length=10)
    custom_name = models.CharField(max_length=50, null=True, blank=True)
    custom_number = models.CharField(max_length=10, null=True, blank=True)
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = 'orders'
        db_table = 'order_items'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.product_name} ({self.size}) x {self.quantity}"
