"""Database models for rooms app."""

import uuid
from typing import ClassVar, Final, final, override

from django.db import models

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_NUMBER_MAX_LENGTH: Final = 50
_TYPE_MAX_LENGTH: Final = 100


@final
class Room(models.Model):
    """Bookable room.

    Plain metadata with open CRUD; no lifecycle rules.
    """

    id = models.UUIDField(  # noqa: A003
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        blank=True,
        default='',
    )

    description = models.TextField(blank=True, default='')

    number = models.CharField(
        max_length=_NUMBER_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Room number as printed on the door',
    )

    location = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        blank=True,
        default='',
    )

    capacity = models.PositiveIntegerField(
        default=0,
        help_text='Number of seats',
    )

    room_type = models.CharField(
        max_length=_TYPE_MAX_LENGTH,
        blank=True,
        default='',
        db_column='type',
        help_text='Free-form room category (e.g. meeting, classroom)',
    )

    metadata = models.JSONField(
        default=dict,
        blank=True,
        help_text='Arbitrary extra attributes',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        db_table = 'rooms'
        verbose_name = 'Room'  # type: ignore[mutable-override]
        verbose_name_plural = 'Rooms'  # type: ignore[mutable-override]
        ordering: ClassVar[list[str]] = ['name']

    @override
    def __str__(self) -> str:
        """String representation."""
        if self.number:
            return f'{self.name} ({self.number})'
        return self.name
