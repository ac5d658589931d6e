"""Roles, caller identity and access policies.

Role names arrive from more than one naming scheme ('admin' and the
module-scoped 'S2Files.Admin'). They are resolved once, into ``Role``
members, when the caller is built from the request user. Everything past
that boundary compares enum members only.
"""

import enum
from dataclasses import dataclass
from typing import Any, Final

from server.common.exceptions import AuthenticationError

# User type for Django's dynamic user model
_User = Any


class Role(enum.Enum):
    """Roles known to the application."""

    ADMIN = 'admin'


_ROLE_ALIASES: Final[dict[str, Role]] = {
    'admin': Role.ADMIN,
    's2files.admin': Role.ADMIN,
    's2files_admin': Role.ADMIN,
}


@dataclass(frozen=True, slots=True)
class Caller:
    """Authenticated identity performing an operation."""

    user_id: Any
    roles: frozenset[Role] = frozenset()

    def has_role(self, role: Role) -> bool:
        """Check whether the caller holds ``role``."""
        return role in self.roles

    @property
    def is_admin(self) -> bool:
        """Whether the caller holds the administrative role."""
        return self.has_role(Role.ADMIN)


def resolve_roles(
    role_names: list[str],
    *,
    is_superuser: bool = False,
) -> frozenset[Role]:
    """Map raw role names onto ``Role`` members.

    Unknown names are ignored.

    Args:
        role_names: Raw role or group names.
        is_superuser: Django superusers always hold ``Role.ADMIN``.

    Returns:
        Set of resolved roles.
    """
    roles = {
        _ROLE_ALIASES[name.strip().lower()]
        for name in role_names
        if name.strip().lower() in _ROLE_ALIASES
    }
    if is_superuser:
        roles.add(Role.ADMIN)
    return frozenset(roles)


def resolve_caller(user: _User | None) -> Caller:
    """Build the caller for an authenticated Django user.

    Roles come from the user's group names.

    Args:
        user: Request user (may be AnonymousUser or None).

    Returns:
        Caller with resolved roles.

    Raises:
        AuthenticationError: If there is no signed-in user.
    """
    if user is None or not user.is_authenticated:
        raise AuthenticationError
    group_names = list(user.groups.values_list('name', flat=True))
    return Caller(
        user_id=user.pk,
        roles=resolve_roles(group_names, is_superuser=user.is_superuser),
    )


class Access(enum.Enum):
    """Who may perform an operation."""

    NOBODY = 'nobody'
    EVERYONE = 'everyone'
    SIGNED_IN = 'signed_in'
    ADMIN = 'admin'


def _allows(access: Access, caller: Caller | None) -> bool:
    if access is Access.EVERYONE:
        return True
    if access is Access.NOBODY or caller is None:
        return False
    if access is Access.SIGNED_IN:
        return True
    return caller.is_admin


@dataclass(frozen=True, slots=True)
class AccessPolicy:
    """Per-entity access rules.

    Each field names who may perform the matching operation; the
    ``can_*`` methods evaluate it for a caller (None when anonymous).
    """

    insert: Access
    read: Access
    update: Access
    delete: Access

    def can_insert(self, caller: Caller | None) -> bool:
        """Whether ``caller`` may create records."""
        return _allows(self.insert, caller)

    def can_read(self, caller: Caller | None) -> bool:
        """Whether ``caller`` may read records."""
        return _allows(self.read, caller)

    def can_update(self, caller: Caller | None) -> bool:
        """Whether ``caller`` may update records."""
        return _allows(self.update, caller)

    def can_delete(self, caller: Caller | None) -> bool:
        """Whether ``caller`` may delete any record."""
        return _allows(self.delete, caller)
