from django.apps import AppConfig


class DashboardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.dashboard'
    label = 'dashboard'
    verbose_name = 'Admin dashboard'

    def ready(self):
        from .interfaces import admin  # noqa: F401
