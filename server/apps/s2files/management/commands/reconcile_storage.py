"""Management command to reconcile object storage with file records."""

from datetime import timedelta
from typing import Any, Final

from django.core.files.storage import default_storage
from django.core.management.base import BaseCommand
from django.utils import timezone

from server.apps.s2files.logic.reconciliation import reconcile

_DEFAULT_GRACE_MINUTES: Final = 60
_DEFAULT_BATCH_SIZE: Final = 1000


class Command(BaseCommand):
    """Delete orphaned objects and report records missing their object."""

    help = 'Reconcile object storage with file metadata'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be deleted without deleting',
        )
        parser.add_argument(
            '--grace-minutes',
            type=int,
            default=_DEFAULT_GRACE_MINUTES,
            help=(
                'Skip objects newer than this many minutes '
                f'(default: {_DEFAULT_GRACE_MINUTES})'
            ),
        )
        parser.add_argument(
            '--batch-size',
            type=int,
            default=_DEFAULT_BATCH_SIZE,
            help=f'Max orphans to process (default: {_DEFAULT_BATCH_SIZE})',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the reconciliation.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        dry_run = options['dry_run']
        cutoff = timezone.now() - timedelta(minutes=options['grace_minutes'])

        self.stdout.write(f'Looking for orphaned objects older than {cutoff}')

        report = reconcile(
            default_storage,  # type: ignore[arg-type]
            cutoff,
            batch_size=options['batch_size'],
            dry_run=dry_run,
        )

        for key in report.orphaned_keys:
            if dry_run:
                self.stdout.write(f'Would delete: {key}')
        for key in report.failed_keys:
            self.stderr.write(f'Failed to delete {key}')
        for file_id in report.dangling_file_ids:
            self.stdout.write(
                self.style.WARNING(f'Missing object for file {file_id}'),
            )

        if dry_run:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Would delete {len(report.orphaned_keys)} orphaned objects',
                ),
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Deleted {len(report.deleted_keys)} orphaned objects, '
                    f'{len(report.failed_keys)} failed',
                ),
            )
        self.stdout.write(
            f'{len(report.dangling_file_ids)} records without stored object',
        )
