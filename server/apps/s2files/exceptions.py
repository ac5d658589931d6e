"""Exceptions for s2files app."""

_DELETE_DENIED = (
    'Permission denied: You can only delete your own files or must be an admin'
)


class S2FilesError(Exception):
    """Base class for file lifecycle errors."""


class FilePermissionError(S2FilesError):
    """Raised when a signed-in caller may not act on a file."""

    def __init__(self, message: str | None = None) -> None:
        """Initialize FilePermissionError.

        Args:
            message: Reason, defaults to the ownership rule for deletes.
        """
        super().__init__(message or _DELETE_DENIED)


class FileRecordNotFoundError(S2FilesError):
    """Raised when the referenced file record does not exist."""

    def __init__(self, file_id: object) -> None:
        """Initialize FileRecordNotFoundError.

        Args:
            file_id: Identifier that was looked up.
        """
        self.file_id = file_id
        super().__init__('File not found')


class UploadError(S2FilesError):
    """Raised when storing a file or its metadata fails."""

    def __init__(self, cause: str) -> None:
        """Initialize UploadError.

        Args:
            cause: Message of the underlying failure.
        """
        super().__init__(f'Failed to upload file: {cause}')


class DeleteError(S2FilesError):
    """Raised when removing a file or its metadata fails."""

    def __init__(self, cause: str) -> None:
        """Initialize DeleteError.

        Args:
            cause: Message of the underlying failure.
        """
        super().__init__(f'Failed to delete file: {cause}')


class PresignError(S2FilesError):
    """Raised when a download URL cannot be generated.

    The underlying cause is logged, never included in the message.
    """

    def __init__(self) -> None:
        """Initialize PresignError."""
        super().__init__('Failed to generate download URL')
