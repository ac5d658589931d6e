"""Tests for metadata utilities."""

import binascii
import re

import pytest

from server.apps.s2files.infrastructure.metadata import (
    build_storage_key,
    decode_payload,
    generate_token,
    get_file_extension,
    resolve_mime_type,
)


def test_decode_payload():
    """Test base64 payload decoding."""
    assert decode_payload('dGVzdCBjb250ZW50') == b'test content'
    assert decode_payload('') == b''


def test_decode_payload_invalid():
    """Test badly padded payload raises."""
    with pytest.raises(binascii.Error):
        decode_payload('abc')


def test_get_file_extension():
    """Test extension is the text after the last dot."""
    assert get_file_extension('test.pdf') == 'pdf'
    assert get_file_extension('test.TXT') == 'TXT'  # Case is kept
    assert get_file_extension('test') == ''  # No extension
    assert get_file_extension('test.tar.gz') == 'gz'  # Last extension
    assert get_file_extension('.env') == 'env'
    assert get_file_extension('trailing.') == ''


def test_generate_token_unique():
    """Test tokens are fresh UUID strings."""
    first = generate_token()
    second = generate_token()

    assert first != second
    assert re.match(r'^[0-9a-f-]{36}$', first)


def test_build_storage_key():
    """Test key layout."""
    assert build_storage_key('report.pdf', token='abc') == 'files/abc.pdf'
    assert build_storage_key('README', token='abc') == 'files/abc.'


def test_build_storage_key_generates_token():
    """Test a token is generated when none is given."""
    key = build_storage_key('photo.jpg')

    assert re.match(r'^files/[0-9a-f-]{36}\.jpg$', key)


def test_resolve_mime_type():
    """Test declared MIME type wins and empty ones are guessed."""
    assert resolve_mime_type('text/plain', 'image.png') == 'text/plain'
    assert resolve_mime_type('', 'image.png') == 'image/png'
    assert resolve_mime_type('', 'test.unknown') == 'application/octet-stream'
