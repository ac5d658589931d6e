"""Django admin configuration for rooms app."""

from django.contrib import admin

from server.apps.rooms.models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin[Room]):
    """Admin interface for Room model."""

    list_display = [
        'name',
        'number',
        'location',
        'capacity',
        'room_type',
        'created_at',
    ]

    list_filter = [
        'room_type',
        'location',
    ]

    search_fields = [
        'name',
        'number',
        'location',
    ]

    readonly_fields = ['created_at', 'updated_at']
