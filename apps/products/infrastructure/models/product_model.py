"""
Product Django ORM model.
"""
import uuid

from django.db import models


class ProductModel(models.Model):
    """Jersey catalog row."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product_number = models.CharField(max_length=100, blank=True, default='')
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default='INR')
    image = models.CharField(max_length=500, blank=True, default='')
    category = models.CharField(max_length=100, default='General', db_index=True)
    team = models.CharField(max_length=100, blank=True, default='', db_index=True)
    # Comma separated, e.g. "S,M,L,XL,2XL".
    sizes = models.CharField(max_length=255, default='S,M,L,XL,2XL')
    stock = models.PositiveIntegerField(default=10)
    featured = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'products'
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category', 'team']),
        ]

    def __str__(self):
        return f"{self.name} ({self.team})" if self.team else self.name
