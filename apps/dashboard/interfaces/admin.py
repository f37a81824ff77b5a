"""
Dashboard admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.system_event_model import SystemEventModel


@admin.register(SystemEventModel)
class SystemEventAdmin(admin.ModelAdmin):
    """Admin configuration for SystemEvent model."""
    list_display = ('event_type', 'message', 'created_at')
    list_filter = ('event_type',)
    search_fields = ('message',)
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at')
