"""Custom storage backend for S3-compatible object storage."""

import logging
from collections.abc import Iterator
from datetime import datetime
from typing import Any, Final, final, override

from django.core.exceptions import ImproperlyConfigured
from django.core.files.base import ContentFile
from storages.backends.s3 import S3Storage

logger = logging.getLogger(__name__)

_REQUIRED_OPTIONS: Final = (
    'endpoint_url',
    'access_key',
    'secret_key',
    'bucket_name',
    'region_name',
)


@final
class FileStorage(S3Storage):
    """S3 storage backend for uploaded files.

    Extends django-storages S3Storage with the object store operations
    the file lifecycle needs:
    - write raw bytes under an exact key
    - delete by key
    - presign a time-limited URL for one HTTP method
    - enumerate objects for reconciliation

    Construction fails fast when any connection value is missing.
    """

    def __init__(self, **settings: Any) -> None:
        """Initialize storage and validate connection values.

        Args:
            settings: django-storages S3 options.

        Raises:
            ImproperlyConfigured: If endpoint, credentials, bucket or
                region are missing.
        """
        super().__init__(**settings)
        missing = [
            option
            for option in _REQUIRED_OPTIONS
            if not getattr(self, option, None)
        ]
        if missing:
            raise ImproperlyConfigured(
                'Missing required object storage settings: {0}'.format(
                    ', '.join(missing),
                ),
            )

    def write(self, key: str, data: bytes) -> str:
        """Write raw bytes to storage under ``key``.

        Args:
            key: Object key (e.g. 'files/<uuid>.txt').
            data: Raw object content.

        Returns:
            Actual key used by the storage.

        Raises:
            Exception: If S3 upload fails.
        """
        try:
            logger.info('Writing object to storage: %s', key)
            saved_name = self.save(key, ContentFile(data))
            logger.info(
                'Successfully wrote object: %s (%d bytes)',
                saved_name,
                len(data),
            )
        except Exception:
            logger.exception('Failed to write object to storage: %s', key)
            raise
        else:
            return saved_name

    @override
    def delete(self, name: str) -> None:
        """Delete object from S3 with error handling and logging.

        Args:
            name: Object key to delete.

        Raises:
            Exception: If S3 delete fails.
        """
        try:
            logger.info('Deleting object from storage: %s', name)
            super().delete(name)
            logger.info('Successfully deleted object: %s', name)
        except Exception:
            logger.exception('Failed to delete object from storage: %s', name)
            raise

    def presign(self, key: str, expires_in: int, method: str = 'GET') -> str:
        """Generate a presigned URL for one object.

        Args:
            key: Object key.
            expires_in: URL validity in seconds.
            method: HTTP method the URL is scoped to.

        Returns:
            Presigned URL string.
        """
        logger.debug(
            'Presigning %s URL for %s (expires in %ds)',
            method,
            key,
            expires_in,
        )
        return self.url(key, expire=expires_in, http_method=method)

    def iter_objects(self, prefix: str) -> Iterator[tuple[str, datetime]]:
        """Iterate over objects stored under a key prefix.

        Args:
            prefix: Key prefix (e.g. 'files/').

        Yields:
            Tuples of (key, last modified time).
        """
        for summary in self.bucket.objects.filter(Prefix=prefix):
            yield summary.key, summary.last_modified
