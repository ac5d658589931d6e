"""Django admin configuration for s2files app."""

from django.contrib import admin, messages
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.s2files.exceptions import S2FilesError
from server.apps.s2files.logic.access_policy import FILE_POLICY
from server.apps.s2files.logic.file_operations import delete_file
from server.apps.s2files.models import File
from server.common.access_policy import resolve_caller
from server.common.exceptions import AuthenticationError


def _format_bytes(size_bytes: int) -> str:
    """Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size string (e.g., '1.5 MB', '234 KB').
    """
    if size_bytes < 1024:
        return f'{size_bytes} B'
    if size_bytes < 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / 1024:.1f} KB'
    if size_bytes < 1024 * 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / (1024 * 1024):.1f} MB'
    return f'{size_bytes / (1024 * 1024 * 1024):.1f} GB'


@admin.register(File)
class FileAdmin(admin.ModelAdmin[File]):
    """Admin interface for File model.

    Records are read-only. Deleting goes through the file lifecycle so
    the stored object is removed together with its record.
    """

    list_display = [
        'filename',
        'uploaded_by',
        'size_display',
        'mime_type',
        'created_at',
    ]

    list_filter = [
        'mime_type',
        'created_at',
    ]

    search_fields = [
        'filename',
        'key',
    ]

    readonly_fields = [
        'id',
        'filename',
        'key',
        'mime_type',
        'size',
        'uploaded_by',
        'created_at',
        'updated_at',
    ]

    def size_display(self, obj: File) -> str:
        """Display file size in human-readable format.

        Args:
            obj: File instance.

        Returns:
            Formatted size string.
        """
        return _format_bytes(obj.size)
    size_display.short_description = 'Size'  # type: ignore[attr-defined]

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Files are created by upload only."""
        return False

    def has_change_permission(
        self,
        request: HttpRequest,
        obj: File | None = None,
    ) -> bool:
        """File metadata is never updated."""
        return False

    def has_delete_permission(
        self,
        request: HttpRequest,
        obj: File | None = None,
    ) -> bool:
        """Only admins and the uploader may delete a file.

        Args:
            request: HTTP request.
            obj: File being deleted, None for the changelist.

        Returns:
            Whether the delete action is offered.
        """
        if not super().has_delete_permission(request, obj):
            return False
        if obj is None:
            return True
        try:
            caller = resolve_caller(request.user)
        except AuthenticationError:
            return False
        return FILE_POLICY.can_delete_file(caller, obj.uploaded_by_id)

    def delete_model(self, request: HttpRequest, obj: File) -> None:
        """Delete object and record through the file lifecycle."""
        delete_file(request.user, obj.pk)

    def delete_queryset(
        self,
        request: HttpRequest,
        queryset: QuerySet[File],
    ) -> None:
        """Bulk delete through the file lifecycle, one file at a time.

        Files that fail are reported and skipped; the rest are deleted.
        """
        for file_instance in queryset:
            try:
                delete_file(request.user, file_instance.pk)
            except S2FilesError as error:
                self.message_user(
                    request,
                    f'{file_instance.filename}: {error}',
                    level=messages.ERROR,
                )

    def get_queryset(self, request: HttpRequest) -> QuerySet[File]:
        """Optimize queryset with select_related.

        Args:
            request: HTTP request.

        Returns:
            Optimized QuerySet.
        """
        return super().get_queryset(request).select_related('uploaded_by')
