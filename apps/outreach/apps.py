from django.apps import AppConfig


class OutreachConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.outreach'
    label = 'outreach'
    verbose_name = 'Contact and newsletter'
