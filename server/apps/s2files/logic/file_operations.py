"""Business logic for the file lifecycle.

Each operation keeps the object store and the metadata store in step:
upload writes the object before saving its record, delete removes the
object before removing its record. Neither step is compensated when the
second one fails; the leftovers are found by the ``reconcile_storage``
management command.
"""

import logging
from typing import TYPE_CHECKING, Any, Final

from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.db.models import QuerySet

from server.apps.s2files.exceptions import (
    DeleteError,
    FilePermissionError,
    FileRecordNotFoundError,
    PresignError,
    UploadError,
)
from server.apps.s2files.infrastructure.metadata import (
    build_storage_key,
    decode_payload,
    resolve_mime_type,
)
from server.apps.s2files.logic.access_policy import FILE_POLICY
from server.apps.s2files.models import File
from server.common.access_policy import Caller, resolve_caller

if TYPE_CHECKING:
    from server.apps.s2files.infrastructure.storage import FileStorage

# User type for Django's dynamic user model
_User = Any

DOWNLOAD_URL_EXPIRES_IN: Final = 3600
_DOWNLOAD_URL_METHOD: Final = 'GET'

logger = logging.getLogger(__name__)


def _get_storage() -> 'FileStorage':
    """Get the configured default storage backend.

    Returns:
        FileStorage instance with proper S3 configuration.
    """
    return default_storage  # type: ignore[return-value]


def _lookup(file_id: Any) -> File | None:
    """Fetch a file record, treating malformed ids as absent."""
    try:
        return File.objects.filter(id=file_id).first()
    except (ValueError, ValidationError):
        logger.debug('Malformed file id: %r', file_id)
        return None


def _require(allowed: bool, action: str) -> None:
    if not allowed:
        raise FilePermissionError(
            f'Permission denied: You may not {action} files',
        )


def upload_file(  # noqa: WPS211
    user: _User,
    filename: str,
    mime_type: str,
    file_data: str,
    storage: 'FileStorage | None' = None,
) -> File:
    """Store an uploaded file and create its metadata record.

    The object is written first, then the record is saved. If the save
    fails the object stays in storage (logged as orphaned).

    Args:
        user: Request user.
        filename: Client-supplied filename.
        mime_type: Client-declared MIME type.
        file_data: Base64 encoded file content.
        storage: Object store, defaults to the configured storage.

    Returns:
        Created File instance.

    Raises:
        AuthenticationError: If the user is not signed in.
        UploadError: If decoding, the storage write or the DB save fails.
    """
    caller = resolve_caller(user)
    _require(FILE_POLICY.can_insert(caller), 'upload')

    if storage is None:
        storage = _get_storage()

    key = build_storage_key(filename)

    # Step 1: Upload to storage first
    try:
        payload = decode_payload(file_data)
        stored_key = storage.write(key, payload)
    except Exception as error:
        logger.exception('Failed to upload file to storage: %s', key)
        raise UploadError(str(error)) from error

    # Step 2: Create database record under the name storage actually used
    try:
        with transaction.atomic():
            file_instance = File.objects.create(
                filename=filename,
                key=stored_key,
                mime_type=resolve_mime_type(mime_type, filename),
                size=len(payload),
                uploaded_by_id=caller.user_id,
            )
    except Exception as error:
        logger.exception(
            'Database save failed, object left orphaned in storage: %s',
            stored_key,
        )
        raise UploadError(str(error)) from error

    logger.info(
        'File uploaded: %s (ID: %s, %d bytes)',
        file_instance.key,
        file_instance.id,
        file_instance.size,
    )
    return file_instance


def can_delete(caller: Caller, file_instance: File) -> bool:
    """Check whether ``caller`` may delete ``file_instance``.

    Args:
        caller: Authenticated caller.
        file_instance: File to delete.

    Returns:
        True for admins and for the file's uploader.
    """
    return FILE_POLICY.can_delete_file(caller, file_instance.uploaded_by_id)


def delete_file(
    user: _User,
    file_id: Any,
    storage: 'FileStorage | None' = None,
) -> None:
    """Delete a file from storage and its metadata record.

    Args:
        user: Request user.
        file_id: ID of file to delete.
        storage: Object store, defaults to the configured storage.

    Raises:
        AuthenticationError: If the user is not signed in.
        FileRecordNotFoundError: If the file doesn't exist.
        FilePermissionError: If the user is neither admin nor uploader.
        DeleteError: If the storage or DB deletion fails.
    """
    caller = resolve_caller(user)

    if storage is None:
        storage = _get_storage()

    file_instance = _lookup(file_id)
    if file_instance is None:
        logger.warning('File not found for delete: ID=%s', file_id)
        raise FileRecordNotFoundError(file_id)

    if not can_delete(caller, file_instance):
        logger.warning(
            'Delete denied: user %s on file %s (uploader %s)',
            caller.user_id,
            file_instance.id,
            file_instance.uploaded_by_id,
        )
        raise FilePermissionError

    logger.info(
        'Deleting file: ID=%s, key=%s',
        file_instance.id,
        file_instance.key,
    )

    try:
        storage.delete(file_instance.key)
        with transaction.atomic():
            file_instance.delete()
    except Exception as error:
        logger.exception('Failed to delete file: ID=%s', file_id)
        raise DeleteError(str(error)) from error

    logger.info('File deleted: ID=%s', file_id)


def find_file(user: _User, file_id: Any) -> File | None:
    """Get a file record by ID.

    Args:
        user: Request user.
        file_id: ID of the file.

    Returns:
        File instance, or None if it doesn't exist.

    Raises:
        AuthenticationError: If the user is not signed in.
    """
    caller = resolve_caller(user)
    _require(FILE_POLICY.can_read(caller), 'read')
    return _lookup(file_id)


def list_files(user: _User, search_query: str | None = None) -> QuerySet[File]:
    """List file records, optionally filtered by filename.

    Args:
        user: Request user.
        search_query: Substring the filename must contain. Case
            sensitivity follows the database's ``contains`` lookup.

    Returns:
        QuerySet of matching File objects (unbounded).

    Raises:
        AuthenticationError: If the user is not signed in.
    """
    caller = resolve_caller(user)
    _require(FILE_POLICY.can_read(caller), 'read')

    if search_query:
        logger.debug('Listing files matching: %s', search_query)
        return File.objects.filter(filename__contains=search_query)
    return File.objects.all()


def get_download_url(
    user: _User,
    file_id: Any,
    storage: 'FileStorage | None' = None,
) -> str:
    """Generate a presigned GET URL for a file.

    Args:
        user: Request user.
        file_id: ID of the file.
        storage: Object store, defaults to the configured storage.

    Returns:
        URL valid for ``DOWNLOAD_URL_EXPIRES_IN`` seconds.

    Raises:
        AuthenticationError: If the user is not signed in.
        FileRecordNotFoundError: If the file doesn't exist.
        PresignError: If presigning fails (cause is only logged).
    """
    caller = resolve_caller(user)
    _require(FILE_POLICY.can_read(caller), 'read')

    file_instance = _lookup(file_id)
    if file_instance is None:
        raise FileRecordNotFoundError(file_id)

    if storage is None:
        storage = _get_storage()

    try:
        return storage.presign(
            file_instance.key,
            expires_in=DOWNLOAD_URL_EXPIRES_IN,
            method=_DOWNLOAD_URL_METHOD,
        )
    except Exception:
        logger.exception('Failed to presign URL for: %s', file_instance.key)
        raise PresignError from None
