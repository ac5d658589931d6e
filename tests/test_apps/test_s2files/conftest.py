"""Shared fixtures for s2files app tests."""

import base64
from unittest import mock

import boto3
import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser, Group
from moto import mock_aws

from server.apps.s2files.models import File

User = get_user_model()


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def other_user(db):
    """Create second test user for ownership tests.

    Returns:
        Second user instance.
    """
    return User.objects.create_user(
        username='otheruser',
        password='testpass123',
        email='other@example.com',
    )


@pytest.fixture
def admin_member(db):
    """Create a non-superuser that belongs to the 'admin' group.

    Returns:
        User holding the admin role through group membership.
    """
    admin = User.objects.create_user(
        username='adminmember',
        password='testpass123',
        email='admin@example.com',
    )
    admin.groups.add(Group.objects.create(name='admin'))
    return admin


@pytest.fixture
def anonymous():
    """Anonymous request user."""
    return AnonymousUser()


@pytest.fixture
def mock_s3(bucket_name):
    """Mock S3 service with the test bucket.

    Args:
        bucket_name: Bucket the test storage uses.

    Yields:
        boto3 S3 resource with the test bucket created.
    """
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=bucket_name)
        yield conn


@pytest.fixture
def fake_storage():
    """Stand-in object store recording the calls made to it.

    Returns:
        Mock with write/delete/presign methods.
    """
    storage = mock.Mock(spec=['write', 'delete', 'presign', 'exists'])
    storage.write.side_effect = lambda key, data: key
    return storage


@pytest.fixture
def encoded_content():
    """Base64 encoded 'test content' (12 bytes)."""
    return base64.b64encode(b'test content').decode()


@pytest.fixture
def make_file(user):
    """Factory creating File records without touching storage.

    Returns:
        Callable creating a File.
    """
    def factory(
        filename: str = 'test.txt',
        key: str | None = None,
        uploaded_by=None,
    ) -> File:
        return File.objects.create(
            filename=filename,
            key=key or f'files/{filename}',
            mime_type='text/plain',
            size=100,
            uploaded_by=uploaded_by or user,
        )
    return factory
