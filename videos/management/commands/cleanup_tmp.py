"""
Management command to clean up abandoned upload temp files.

Uploads remove their own temp files on every exit path, so leftovers in the
temp root only come from processes that were killed mid-request.
"""
from datetime import datetime, timedelta
from pathlib import Path

from django.core.management.base import BaseCommand
from django.utils import timezone

from videos.service.config import get_api_config


class Command(BaseCommand):
    help = 'Clean up abandoned upload temp files'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be deleted without actually deleting'
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='Delete temp files without confirmation'
        )
        parser.add_argument(
            '--max-age',
            type=int,
            default=60,
            help='Maximum age in minutes before considering a temp file abandoned (default: 60)'
        )

    def handle(self, *args, **options):
        """Find and clean up abandoned temp files"""
        dry_run = options['dry_run']
        force = options['force']
        max_age_minutes = options['max_age']

        temp_root = Path(get_api_config().temp_root)

        if not temp_root.exists():
            self.stdout.write(self.style.SUCCESS(f"Temp directory {temp_root} does not exist"))
            return

        temp_files = [f for f in temp_root.iterdir() if f.is_file()]
        if not temp_files:
            self.stdout.write(self.style.SUCCESS("No temp files found"))
            return

        now = timezone.now()
        max_age = timedelta(minutes=max_age_minutes)
        old_files = []

        for path in temp_files:
            stat = path.stat()
            age = now - datetime.fromtimestamp(stat.st_mtime, tz=timezone.get_current_timezone())
            if age > max_age:
                old_files.append({'path': path, 'age': age, 'size': stat.st_size})

        if not old_files:
            self.stdout.write(self.style.SUCCESS(
                f"Found {len(temp_files)} temp file{'s' if len(temp_files) != 1 else ''}, "
                f"but none are older than {max_age_minutes} minutes"
            ))
            return

        self.stdout.write(f"\nFound {len(old_files)} abandoned temp file{'s' if len(old_files) != 1 else ''}:")
        self.stdout.write(f"{'=' * 80}")

        total_size = 0
        for info in old_files:
            total_size += info['size']
            age_str = str(info['age']).split('.')[0]  # Remove microseconds
            self.stdout.write(
                f"{info['path'].name[:40]:40} | Age: {age_str:15} | "
                f"Size: {info['size'] / (1024 * 1024):6.1f} MB"
            )

        self.stdout.write(f"{'=' * 80}")
        self.stdout.write(f"Total size: {total_size / (1024 * 1024):.1f} MB\n")

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f"\nDRY RUN: Would delete {len(old_files)} file{'s' if len(old_files) != 1 else ''}"
            ))
            self.stdout.write("Run without --dry-run to actually delete")
            return

        if not force:
            response = input(f"\nDelete these {len(old_files)} files? [y/N]: ")
            if response.lower() != 'y':
                self.stdout.write("Cancelled")
                return

        deleted_count = 0
        for info in old_files:
            try:
                info['path'].unlink()
                self.stdout.write(self.style.SUCCESS(f"✓ Deleted: {info['path'].name}"))
                deleted_count += 1
            except OSError as e:
                self.stdout.write(self.style.ERROR(f"✗ Failed to delete {info['path'].name}: {e}"))

        self.stdout.write(self.style.SUCCESS(
            f"\n✓ Deleted {deleted_count} of {len(old_files)} temp file{'s' if deleted_count != 1 else ''}"
        ))
