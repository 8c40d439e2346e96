"""
Management command to fill a user's history with random purchases.

Usage:
    python manage.py generate_test_data --user demo@example.com
    python manage.py generate_test_data --user demo@example.com --count 200 --days 90
"""

import random

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import User
from apps.purchases.exceptions import MissingReferenceDataError
from apps.purchases.services import generate_random_purchases


class Command(BaseCommand):
    help = 'Insert random purchases for a user using existing stores and categories'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            required=True,
            help='Email of the user who will own the purchases',
        )
        parser.add_argument(
            '--count',
            type=int,
            default=None,
            help='Number of purchases to create (default: random 50-150)',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=365,
            help='Spread purchases over this many past days (default: 365)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible data',
        )

    def handle(self, *args, **options):
        try:
            user = User.objects.get(email__iexact=options['user'])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['user']}' does not exist")

        if options['days'] < 0:
            raise CommandError('--days must not be negative')

        rng = random.Random(options['seed'])
        count = options['count']
        if count is None:
            count = rng.randint(50, 150)
        if count < 1:
            raise CommandError('--count must be positive')

        try:
            purchases = generate_random_purchases(
                owner=user,
                count=count,
                days=options['days'],
                rng=rng,
            )
        except MissingReferenceDataError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(purchases)} purchase(s) for {user.email}'
        ))
