"""Metadata helpers for uploaded files."""

import base64
import mimetypes
import uuid
from typing import Final

KEY_PREFIX: Final = 'files/'

_DEFAULT_MIME_TYPE: Final = 'application/octet-stream'


def decode_payload(file_data: str) -> bytes:
    """Decode a base64 encoded upload payload.

    Args:
        file_data: Base64 text sent by the client.

    Returns:
        Raw file bytes.

    Raises:
        binascii.Error: If the payload is not valid base64.
    """
    return base64.b64decode(file_data)


def get_file_extension(filename: str) -> str:
    """Get file extension from filename.

    Unlike ``Path.suffix`` this keeps the original case and treats
    dotfiles ('.env') as having an extension.

    Args:
        filename: Filename (e.g., 'document.pdf').

    Returns:
        Text after the last dot (e.g., 'pdf').
        Returns empty string if there is no dot.
    """
    _, dot, extension = filename.rpartition('.')
    if not dot:
        return ''
    return extension


def generate_token() -> str:
    """Generate a fresh unique token for an object key."""
    return str(uuid.uuid4())


def build_storage_key(filename: str, token: str | None = None) -> str:
    """Build the object key for a new upload.

    Args:
        filename: Client-supplied filename.
        token: Unique token, generated when omitted.

    Returns:
        Key in the form 'files/{token}.{extension}'.
    """
    if token is None:
        token = generate_token()
    return f'{KEY_PREFIX}{token}.{get_file_extension(filename)}'


def resolve_mime_type(declared: str, filename: str) -> str:
    """Return the declared MIME type, guessing only when it is empty.

    Declared types are trusted as-is and never checked against the
    payload.

    Args:
        declared: MIME type sent by the client.
        filename: Filename used for the guess.

    Returns:
        MIME type string.
    """
    if declared:
        return declared
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return _DEFAULT_MIME_TYPE
    return mime_type
