"""Exceptions shared by every app."""


class AuthenticationError(Exception):
    """Raised when the caller is not signed in."""

    def __init__(self) -> None:
        """Initialize AuthenticationError."""
        super().__init__('Authentication required')
