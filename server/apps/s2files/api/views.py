"""HTTP views for the file lifecycle.

Views stay thin: they parse the request, call ``logic.file_operations``
and serialize the result. Authentication and ownership are enforced by
the logic layer; ``IsAuthenticated`` only rejects anonymous callers early.
"""

from uuid import UUID

from rest_framework import permissions, status, views
from rest_framework.request import Request
from rest_framework.response import Response

from server.apps.s2files.api.serializers import (
    DownloadUrlSerializer,
    FileSerializer,
    FileUploadSerializer,
)
from server.apps.s2files.exceptions import FileRecordNotFoundError
from server.apps.s2files.logic import file_operations


class FileListCreateAPIView(views.APIView):
    """List files (GET) and upload a new file (POST)."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request) -> Response:
        files = file_operations.list_files(
            request.user,
            request.query_params.get('search'),
        )
        return Response(FileSerializer(files, many=True).data)

    def post(self, request: Request) -> Response:
        upload = FileUploadSerializer(data=request.data)
        upload.is_valid(raise_exception=True)
        file_instance = file_operations.upload_file(
            request.user,
            **upload.validated_data,
        )
        return Response(
            FileSerializer(file_instance).data,
            status=status.HTTP_201_CREATED,
        )


class FileDetailAPIView(views.APIView):
    """Retrieve (GET) or delete (DELETE) one file. No updates."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request, file_id: UUID) -> Response:
        file_instance = file_operations.find_file(request.user, file_id)
        if file_instance is None:
            raise FileRecordNotFoundError(file_id)
        return Response(FileSerializer(file_instance).data)

    def delete(self, request: Request, file_id: UUID) -> Response:
        file_operations.delete_file(request.user, file_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class FileDownloadUrlAPIView(views.APIView):
    """Issue a presigned download URL for one file."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request, file_id: UUID) -> Response:
        url = file_operations.get_download_url(request.user, file_id)
        return Response(DownloadUrlSerializer({'url': url}).data)
