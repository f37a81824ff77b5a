"""
System event Django ORM model.
"""
import uuid

from django.db import models


class SystemEventModel(models.Model):
    """Activity feed row shown on the admin dashboard."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_type = models.CharField(max_length=50, db_index=True)
    message = models.TextField()
    metadata = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = 'dashboard'
        db_table = 'system_events'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.event_type}: {self.message}"
