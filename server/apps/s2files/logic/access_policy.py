"""Access rules for file metadata.

On top of the role rule, a file's uploader may always delete it.
"""

from dataclasses import dataclass
from typing import Any, Final

from server.common.access_policy import Access, AccessPolicy, Caller


@dataclass(frozen=True, slots=True)
class FileAccessPolicy(AccessPolicy):
    """Access policy that also lets the uploader delete a file."""

    def can_delete_file(self, caller: Caller, uploaded_by_id: Any) -> bool:
        """Whether ``caller`` may delete a file uploaded by ``uploaded_by_id``.

        Args:
            caller: Authenticated caller.
            uploaded_by_id: Primary key of the file's uploader.

        Returns:
            True for admins and for the uploader.
        """
        if self.can_delete(caller):
            return True
        return str(uploaded_by_id) == str(caller.user_id)


FILE_POLICY: Final = FileAccessPolicy(
    insert=Access.SIGNED_IN,
    read=Access.SIGNED_IN,
    update=Access.NOBODY,
    delete=Access.ADMIN,
)
