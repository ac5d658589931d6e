"""Database models for s2files app."""

import uuid
from typing import ClassVar, Final, final, override

from django.conf import settings
from django.db import models

# Constants for field max lengths
_FILENAME_MAX_LENGTH: Final = 255
_KEY_MAX_LENGTH: Final = 512
_MIME_TYPE_MAX_LENGTH: Final = 255


@final
class File(models.Model):
    """Metadata of a file stored in S3-compatible storage.

    The bytes live in the object store under ``key``; this record only
    describes them. Records are created by upload and removed by delete,
    never updated.
    """

    id = models.UUIDField(  # noqa: A003
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    filename = models.CharField(
        max_length=_FILENAME_MAX_LENGTH,
        help_text='Original client-supplied filename',
    )

    key = models.CharField(
        max_length=_KEY_MAX_LENGTH,
        unique=True,
        editable=False,
        help_text='Object key in storage: files/{uuid}.{extension}',
    )

    mime_type = models.CharField(
        max_length=_MIME_TYPE_MAX_LENGTH,
        help_text='Client-declared MIME type',
    )

    size = models.BigIntegerField(
        help_text='Decoded payload size in bytes',
    )

    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='uploaded_files',
        editable=False,
        db_index=True,
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        db_table = 'files'
        verbose_name = 'File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Files'  # type: ignore[mutable-override]
        ordering: ClassVar[list[str]] = ['-created_at']

        indexes: ClassVar[list[models.Index]] = [
            models.Index(
                fields=['uploaded_by', '-created_at'],
                name='files_uploader_recent_idx',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.filename} ({self.key})'
