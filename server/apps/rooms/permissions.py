"""DRF permission backed by an access policy."""

from typing import Any, Final

from rest_framework import permissions
from rest_framework.request import Request

from server.common.access_policy import (
    Access,
    AccessPolicy,
    Caller,
    resolve_caller,
)
from server.common.exceptions import AuthenticationError

ROOM_POLICY: Final = AccessPolicy(
    insert=Access.EVERYONE,
    read=Access.EVERYONE,
    update=Access.EVERYONE,
    delete=Access.EVERYONE,
)

_ACTION_CHECKS = {
    'GET': 'can_read',
    'HEAD': 'can_read',
    'OPTIONS': 'can_read',
    'POST': 'can_insert',
    'PUT': 'can_update',
    'PATCH': 'can_update',
    'DELETE': 'can_delete',
}


class PolicyPermission(permissions.BasePermission):
    """Allow a request when the view's access policy allows its method."""

    policy: AccessPolicy = ROOM_POLICY

    def has_permission(self, request: Request, view: Any) -> bool:
        check_name = _ACTION_CHECKS.get(request.method or '')
        if check_name is None:
            return False
        return getattr(self.policy, check_name)(_optional_caller(request))


def _optional_caller(request: Request) -> Caller | None:
    try:
        return resolve_caller(request.user)
    except AuthenticationError:
        return None
