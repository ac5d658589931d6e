"""Django app configuration for rooms app."""

from django.apps import AppConfig


class RoomsConfig(AppConfig):
    """Configuration for rooms app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.rooms'
    verbose_name = 'Rooms'
