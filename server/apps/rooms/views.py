"""HTTP views for rooms: open CRUD."""

from rest_framework import viewsets

from server.apps.rooms.models import Room
from server.apps.rooms.permissions import PolicyPermission
from server.apps.rooms.serializers import RoomSerializer


class RoomViewSet(viewsets.ModelViewSet):
    """Create, list, retrieve, update and delete rooms."""

    queryset = Room.objects.all()
    serializer_class = RoomSerializer
    permission_classes = [PolicyPermission]
