"""Serializers for the s2files HTTP API."""

from rest_framework import serializers

from server.apps.s2files.models import File


class FileSerializer(serializers.ModelSerializer):
    """Read representation of a file record."""

    uploaded_by = serializers.CharField(source='uploaded_by_id', read_only=True)

    class Meta:
        model = File
        fields = [
            'id',
            'filename',
            'key',
            'mime_type',
            'size',
            'uploaded_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class FileUploadSerializer(serializers.Serializer):
    """Upload request body."""

    filename = serializers.CharField(max_length=255)
    mime_type = serializers.CharField(
        max_length=255,
        allow_blank=True,
        required=False,
        default='',
    )
    file_data = serializers.CharField(
        help_text='Base64 encoded file content',
        trim_whitespace=True,
    )


class DownloadUrlSerializer(serializers.Serializer):
    """Presigned download URL response."""

    url = serializers.URLField()
