"""Reconciliation of object storage against file metadata.

Upload and delete are not atomic across the two stores, so a failure
between the steps leaves either an object without a record (orphan) or
a record without an object (dangling). This module finds both.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from server.apps.s2files.infrastructure.metadata import KEY_PREFIX
from server.apps.s2files.models import File

if TYPE_CHECKING:
    from server.apps.s2files.infrastructure.storage import FileStorage

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationReport:
    """Outcome of one reconciliation pass."""

    orphaned_keys: list[str] = field(default_factory=list)
    deleted_keys: list[str] = field(default_factory=list)
    failed_keys: list[str] = field(default_factory=list)
    dangling_file_ids: list[str] = field(default_factory=list)


def find_orphaned_objects(
    storage: 'FileStorage',
    older_than: datetime,
) -> Iterator[str]:
    """Yield keys of stored objects that have no File record.

    Objects modified after ``older_than`` are skipped so uploads still
    waiting for their record are left alone.

    Args:
        storage: Object store.
        older_than: Only objects last modified before this are reported.

    Yields:
        Orphaned object keys.
    """
    for key, last_modified in storage.iter_objects(KEY_PREFIX):
        if last_modified >= older_than:
            continue
        if not File.objects.filter(key=key).exists():
            yield key


def find_dangling_records(storage: 'FileStorage') -> Iterator[File]:
    """Yield File records whose object is missing from storage.

    Args:
        storage: Object store.

    Yields:
        File instances without a stored object.
    """
    for file_instance in File.objects.order_by('created_at').iterator():
        if not storage.exists(file_instance.key):
            yield file_instance


def reconcile(
    storage: 'FileStorage',
    older_than: datetime,
    *,
    batch_size: int,
    dry_run: bool = False,
) -> ReconciliationReport:
    """Delete orphaned objects and report dangling records.

    Dangling records are never deleted here; they still point at a
    key that an operator may want to restore.

    Args:
        storage: Object store.
        older_than: Grace cutoff for orphaned objects.
        batch_size: Max orphaned objects handled in this pass.
        dry_run: Only report, delete nothing.

    Returns:
        ReconciliationReport describing what was found and done.
    """
    report = ReconciliationReport()

    for key in find_orphaned_objects(storage, older_than):
        if len(report.orphaned_keys) >= batch_size:
            break
        report.orphaned_keys.append(key)
        if dry_run:
            continue
        try:
            storage.delete(key)
        except Exception:
            logger.exception('Failed to delete orphaned object: %s', key)
            report.failed_keys.append(key)
        else:
            logger.info('Deleted orphaned object: %s', key)
            report.deleted_keys.append(key)

    for file_instance in find_dangling_records(storage):
        logger.warning(
            'File record without stored object: ID=%s, key=%s',
            file_instance.id,
            file_instance.key,
        )
        report.dangling_file_ids.append(str(file_instance.id))

    return report
