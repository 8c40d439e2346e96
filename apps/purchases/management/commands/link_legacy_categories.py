"""
Management command to link imported purchases to categories.

Purchases imported from the old database carry their category as free
text. This command matches that text against category names and puts
every purchase that is left over into a default category.

Usage:
    python manage.py link_legacy_categories --dry-run
    python manage.py link_legacy_categories --default-category "Продукты"
"""

from django.core.management.base import BaseCommand

from apps.purchases.services import DEFAULT_LEGACY_CATEGORY, link_legacy_categories


class Command(BaseCommand):
    help = 'Assign categories to purchases that only have a legacy group name'

    def add_arguments(self, parser):
        parser.add_argument(
            '--default-category',
            default=DEFAULT_LEGACY_CATEGORY,
            help=f'Category for purchases with no matching name (default: {DEFAULT_LEGACY_CATEGORY})',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be updated without making changes',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        report = link_legacy_categories(
            default_category_name=options['default_category'],
            dry_run=dry_run,
        )

        self.stdout.write(f"Linked by legacy group name: {report['linked']}")
        self.stdout.write(
            f"Assigned to '{options['default_category']}': {report['defaulted']}"
        )
        self.stdout.write(f"With category: {report['with_category']}")
        self.stdout.write(f"Without category: {report['without_category']}")

        groups = report['unique_legacy_groups']
        self.stdout.write(f'\nUnique legacy groups ({len(groups)}):')
        for group in groups:
            self.stdout.write(f'  - {group}')

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        self.stdout.write(self.style.SUCCESS('\nLegacy categories linked.'))
