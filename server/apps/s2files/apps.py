"""Django app configuration for s2files app."""

from django.apps import AppConfig


class S2FilesConfig(AppConfig):
    """Configuration for s2files app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.s2files'
    label = 's2files'
    verbose_name = 'S2Files'
