"""Project-wide test fixtures."""

from typing import Any, Final

import pytest

TEST_BUCKET: Final = 's2files-test'

_TEST_STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'server.apps.s2files.infrastructure.storage.FileStorage',
        'OPTIONS': {
            'bucket_name': TEST_BUCKET,
            'access_key': 'testing',
            'secret_key': 'testing',
            'endpoint_url': 'https://s3.amazonaws.com',
            'region_name': 'us-east-1',
            'file_overwrite': False,
            'default_acl': None,
            'querystring_auth': True,
        },
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}


@pytest.fixture
def bucket_name() -> str:
    """Name of the bucket the test storage points at."""
    return TEST_BUCKET


@pytest.fixture(autouse=True)
def _test_storages(settings):
    """Point the default storage at the mocked test bucket.

    Changing STORAGES resets ``default_storage``, so every test gets a
    fresh storage instance.
    """
    settings.STORAGES = _TEST_STORAGES
