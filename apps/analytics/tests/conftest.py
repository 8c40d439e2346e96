import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.categories.models import Category
from apps.purchases.models import Purchase
from apps.stores.models import Locality, Store


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_user(db):
    """Create the main analytics test user."""
    return User.objects.create_user(
        email='analytics_user@example.com',
        password='TestPass123!',
        display_name='Analytics User',
    )


@pytest.fixture
def analytics_other_user(db):
    """Create a user whose purchases must never show up in the statistics."""
    return User.objects.create_user(
        email='analytics_other@example.com',
        password='TestPass123!',
        display_name='Other Household',
    )


@pytest.fixture
def analytics_client(api_client, analytics_user):
    """Return API client authenticated as the analytics user."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


# =============================================================================
# Reference data
# =============================================================================

@pytest.fixture
def analytics_city(db):
    return Locality.objects.create(town_ru='Москва', town_en='Moscow', code='MSK')


@pytest.fixture
def grocery_store(analytics_city):
    return Store.objects.create(shop='Пятёрочка', street='Ленина', house='12', locality=analytics_city)


@pytest.fixture
def hardware_store(analytics_city):
    return Store.objects.create(
        shop='Леруа Мерлен',
        street='Волоколамское шоссе',
        house='97',
        locality=analytics_city,
    )


@pytest.fixture
def groceries(db):
    return Category.objects.create(name='Продукты', icon='🛒', color='#FF6B6B', sort_order=10)


@pytest.fixture
def tools(db):
    return Category.objects.create(name='Инструмент', icon='🔧', color='#6c757d', sort_order=20)


@pytest.fixture
def chemicals(db):
    return Category.objects.create(name='Химия', icon='🧴', color='#4ECDC4', sort_order=30)


# =============================================================================
# Purchases
# =============================================================================

@pytest.fixture
def analytics_purchases(
    analytics_user, analytics_other_user,
    grocery_store, hardware_store,
    groceries, tools, chemicals,
):
    """
    Purchases over January and February 2025.

    2025-01-05 is a Sunday, so January falls into a single week.

    | date       | store     | category  | price  | qty | amount |
    |------------|-----------|-----------|--------|-----|--------|
    | 2025-01-05 | grocery   | groceries | 100.00 | 2   | 200.00 |
    | 2025-01-05 | grocery   | groceries | 50.00  | 1   | 50.00  |
    | 2025-01-08 | hardware  | tools     | 300.00 | 1   | 300.00 |
    | 2025-02-10 | hardware  | chemicals | 150.00 | 1   | 150.00 |
    | 2025-02-10 | grocery   | (none)    | 100.00 | 1   | 100.00 |
    | 2025-02-11 | grocery   | groceries | 0.00   | 1   | 0.00   |

    Plus one purchase of the other user that must be ignored.
    """
    rows = [
        (date(2025, 1, 5), grocery_store, groceries, 'Сыр', '100.00', '2'),
        (date(2025, 1, 5), grocery_store, groceries, 'Хлеб', '50.00', '1'),
        (date(2025, 1, 8), hardware_store, tools, 'Дрель', '300.00', '1'),
        (date(2025, 2, 10), hardware_store, chemicals, 'Краска', '150.00', '1'),
        (date(2025, 2, 10), grocery_store, None, 'Пакеты', '100.00', '1'),
        (date(2025, 2, 11), grocery_store, groceries, 'Пробник', '0.00', '1'),
    ]
    purchases = [
        Purchase.objects.create(
            owner=analytics_user,
            date=day,
            store=store,
            category=category,
            name=name,
            price=Decimal(price),
            quantity=Decimal(quantity),
        )
        for day, store, category, name, price, quantity in rows
    ]

    Purchase.objects.create(
        owner=analytics_other_user,
        date=date(2025, 1, 5),
        store=grocery_store,
        category=groceries,
        name='Икра',
        price=Decimal('999.00'),
        quantity=Decimal('1'),
    )

    return purchases
