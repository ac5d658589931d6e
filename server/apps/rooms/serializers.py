"""Serializers for the rooms HTTP API."""

from rest_framework import serializers

from server.apps.rooms.models import Room


class RoomSerializer(serializers.ModelSerializer):
    """Full read/write representation of a room."""

    type = serializers.CharField(  # noqa: A003
        source='room_type',
        allow_blank=True,
        required=False,
        max_length=100,
    )

    class Meta:
        model = Room
        fields = [
            'id',
            'name',
            'description',
            'number',
            'location',
            'capacity',
            'type',
            'metadata',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_metadata(self, value: object) -> object:
        """Metadata must be a JSON object."""
        if not isinstance(value, dict):
            raise serializers.ValidationError('Expected a JSON object.')
        return value
