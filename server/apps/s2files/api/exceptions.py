"""Mapping of file lifecycle errors onto DRF responses."""

from typing import Any

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from server.apps.s2files.exceptions import (
    FilePermissionError,
    FileRecordNotFoundError,
    S2FilesError,
)
from server.common.exceptions import AuthenticationError


class StorageOperationFailed(exceptions.APIException):
    """Object or metadata store failure surfaced to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = 'storage_error'


def _to_api_exception(
    exc: S2FilesError | AuthenticationError,
) -> exceptions.APIException:
    message = str(exc)
    if isinstance(exc, AuthenticationError):
        return exceptions.NotAuthenticated(message)
    if isinstance(exc, FilePermissionError):
        return exceptions.PermissionDenied(message)
    if isinstance(exc, FileRecordNotFoundError):
        return exceptions.NotFound(message)
    return StorageOperationFailed(message)


def s2files_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response | None:
    """DRF exception handler that understands lifecycle errors.

    Args:
        exc: Raised exception.
        context: DRF handler context.

    Returns:
        Response, or None to let Django handle the exception.
    """
    if isinstance(exc, (S2FilesError, AuthenticationError)):
        exc = _to_api_exception(exc)
    return exception_handler(exc, context)
