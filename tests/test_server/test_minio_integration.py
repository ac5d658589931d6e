"""Integration tests for FileStorage against MinIO.

These tests verify that the storage backend works against a real
S3-compatible server when running in Docker Compose.
"""
import os
from typing import Final

import boto3
import pytest
from botocore.client import BaseClient
from botocore.exceptions import ClientError

from server.apps.s2files.infrastructure.storage import FileStorage

_TEST_BUCKET: Final = 's2files'
_TEST_FILE_KEY: Final = 'files/integration-test.txt'
_TEST_FILE_CONTENT: Final = b'Hello from MinIO integration test!'


def _connection() -> dict[str, str]:
    return {
        'endpoint_url': os.getenv('MINIO_ENDPOINT', 'http://minio:9000'),
        'access_key': os.getenv('MINIO_ROOT_USER', 'minioadmin'),
        'secret_key': os.getenv('MINIO_ROOT_PASSWORD', 'minioadmin'),
    }


@pytest.fixture
def s3_client() -> BaseClient:
    """Create S3 client for MinIO.

    Returns:
        Configured boto3 S3 client for MinIO.
    """
    connection = _connection()
    client = boto3.client(
        's3',
        endpoint_url=connection['endpoint_url'],
        aws_access_key_id=connection['access_key'],
        aws_secret_access_key=connection['secret_key'],
        region_name='us-east-1',
    )
    try:
        client.head_bucket(Bucket=_TEST_BUCKET)
    except ClientError:
        client.create_bucket(Bucket=_TEST_BUCKET)
    return client


@pytest.fixture
def file_storage(s3_client: BaseClient) -> FileStorage:
    """Create FileStorage pointed at MinIO.

    Args:
        s3_client: boto3 S3 client (ensures the bucket exists).

    Returns:
        FileStorage instance.
    """
    return FileStorage(
        bucket_name=_TEST_BUCKET,
        region_name='us-east-1',
        file_overwrite=False,
        **_connection(),
    )


@pytest.mark.integration
def test_write_object(s3_client: BaseClient, file_storage: FileStorage) -> None:
    """Test writing an object through FileStorage."""
    file_storage.write(_TEST_FILE_KEY, _TEST_FILE_CONTENT)

    response = s3_client.head_object(Bucket=_TEST_BUCKET, Key=_TEST_FILE_KEY)
    assert response['ContentLength'] == len(_TEST_FILE_CONTENT)

    file_storage.delete(_TEST_FILE_KEY)


@pytest.mark.integration
def test_presign_object(file_storage: FileStorage) -> None:
    """Test presigned URL generation against MinIO."""
    file_storage.write(_TEST_FILE_KEY, _TEST_FILE_CONTENT)

    url = file_storage.presign(_TEST_FILE_KEY, expires_in=3600)

    assert _TEST_FILE_KEY in url
    file_storage.delete(_TEST_FILE_KEY)


@pytest.mark.integration
def test_delete_object(s3_client: BaseClient, file_storage: FileStorage) -> None:
    """Test deleting an object through FileStorage."""
    file_storage.write(_TEST_FILE_KEY, _TEST_FILE_CONTENT)

    file_storage.delete(_TEST_FILE_KEY)

    with pytest.raises(ClientError) as exc_info:
        s3_client.head_object(Bucket=_TEST_BUCKET, Key=_TEST_FILE_KEY)

    assert exc_info.value.response['Error']['Code'] == '404'
