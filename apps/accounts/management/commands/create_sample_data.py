"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear --purchases 300

This creates:
- 2 users (admin, demo)
- 3 cities with 6 stores
- 20 purchase categories
- Random purchases for the demo user over the last year
"""

import random

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.categories.models import Category
from apps.purchases.models import Purchase
from apps.purchases.services import generate_random_purchases
from apps.stores.models import Locality, Store


SAMPLE_CITIES = [
    # (town_ru, town_en, code)
    ('Москва', 'Moscow', 'MSK'),
    ('Тверь', 'Tver', 'TVR'),
    ('Клин', 'Klin', 'KLN'),
]

SAMPLE_STORES = [
    # (shop, street, house, phone, city code)
    ('Пятёрочка', 'Ленина', '12', '', 'MSK'),
    ('Магнит', 'Садовая', '3А', '+7 495 000-00-01', 'MSK'),
    ('Леруа Мерлен', 'Волоколамское шоссе', '97', '', 'MSK'),
    ('Перекрёсток', 'Советская', '45', '', 'TVR'),
    ('Строймаркет', 'Empty', 'Empty', '', 'TVR'),
    ('Хозтовары', 'Гагарина', '7', '', 'KLN'),
]

SAMPLE_CATEGORIES = [
    # (name, icon, color)
    ('Продукты', '🛒', '#FF6B6B'),
    ('Химия', '🧴', '#4ECDC4'),
    ('Коммуналка', '💡', '#90BE6D'),
    ('Стройматериалы', '🧱', '#073B4C'),
    ('Мебель', '🪑', '#7209B7'),
    ('Авто', '🚗', '#EF476F'),
    ('Бензин', '⛽', '#F94144'),
    ('БытоТехника', '🔌', '#118AB2'),
    ('Инструмент', '🔧', '#6c757d'),
    ('Лакокрасочные', '🎨', '#FFD166'),
    ('Посуда', '🍽', '#06D6A0'),
    ('Расходники', '📦', '#007bff'),
    ('Сад', '🌱', '#43AA8B'),
    ('Сантехника', '🚿', '#277DA1'),
    ('Собака', '🐕', '#F8961E'),
    ('Текстиль', '🧵', '#F3722C'),
    ('Электрика', '⚡', '#F9C74F'),
    ('Дерево', '🪵', '#8D5B4C'),
    ('Баня', '🧖', '#B5838D'),
    ('Ветряк', '🌬', '#577590'),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )
        parser.add_argument(
            '--purchases',
            type=int,
            default=100,
            help='Number of random purchases for the demo user (default: 100)',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_stores()
        self.create_categories()
        self.create_purchases(users['demo'], options['purchases'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  demo@example.com / password123')

    def clear_data(self):
        """Clear all data from the database."""
        Purchase.objects.all().delete()
        Store.objects.all().delete()
        Locality.objects.all().delete()
        Category.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'display_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        demo, _ = User.objects.get_or_create(
            email='demo@example.com',
            defaults={'display_name': 'Demo Household'}
        )
        demo.set_password('password123')
        demo.save()

        return {'admin': admin, 'demo': demo}

    def create_stores(self):
        """Create cities and their stores."""
        self.stdout.write('  Creating cities and stores...')

        cities = {}
        for town_ru, town_en, code in SAMPLE_CITIES:
            cities[code], _ = Locality.objects.get_or_create(
                code=code,
                defaults={'town_ru': town_ru, 'town_en': town_en}
            )

        for shop, street, house, phone, code in SAMPLE_STORES:
            Store.objects.get_or_create(
                shop=shop,
                locality=cities[code],
                defaults={'street': street, 'house': house, 'phone': phone}
            )

    def create_categories(self):
        """Create purchase categories."""
        self.stdout.write('  Creating categories...')

        for index, (name, icon, color) in enumerate(SAMPLE_CATEGORIES):
            Category.objects.get_or_create(
                name=name,
                defaults={'icon': icon, 'color': color, 'sort_order': (index + 1) * 10}
            )

    def create_purchases(self, user, count):
        """Create random purchases for the demo user."""
        self.stdout.write(f'  Creating {count} purchases...')

        if count > 0:
            generate_random_purchases(owner=user, count=count, rng=random.Random(42))
