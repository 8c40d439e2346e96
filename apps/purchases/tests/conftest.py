import pytest
from decimal import Decimal
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.categories.models import Category
from apps.purchases.models import Purchase, Unit
from apps.stores.models import Locality, Store


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def purchase_owner(db):
    """Create and return the household member who records purchases."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        display_name='Purchase Owner',
    )


@pytest.fixture
def purchase_other_user(db):
    """Create and return another household member."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other User',
    )


@pytest.fixture
def owner_client(api_client, purchase_owner):
    """Return API client authenticated as the purchase owner."""
    refresh = RefreshToken.for_user(purchase_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(purchase_other_user):
    """Return API client authenticated as the other member."""
    client = APIClient()
    refresh = RefreshToken.for_user(purchase_other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def purchase_city(db):
    return Locality.objects.create(town_ru='Москва', town_en='Moscow', code='MSK')


@pytest.fixture
def purchase_store(purchase_city):
    return Store.objects.create(
        shop='Пятёрочка',
        street='Ленина',
        house='12',
        locality=purchase_city,
    )


@pytest.fixture
def hardware_store(purchase_city):
    return Store.objects.create(
        shop='Леруа Мерлен',
        street='Волоколамское шоссе',
        house='97',
        locality=purchase_city,
    )


@pytest.fixture
def groceries(db):
    return Category.objects.create(name='Продукты', icon='🛒', color='#FF6B6B', sort_order=10)


@pytest.fixture
def tools(db):
    return Category.objects.create(name='Инструмент', icon='🔧', color='#6c757d', sort_order=20)


@pytest.fixture
def retired_category(db):
    return Category.objects.create(name='Архив', is_active=False)


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def milk(purchase_owner, purchase_store, groceries, today):
    """Two litres of milk bought today."""
    return Purchase.objects.create(
        owner=purchase_owner,
        date=today,
        store=purchase_store,
        category=groceries,
        name='Молоко',
        characteristic='3.2%',
        quantity=Decimal('2'),
        unit=Unit.LITRE,
        price=Decimal('89.90'),
    )


@pytest.fixture
def screws(purchase_owner, hardware_store, tools, today):
    """A pack of screws bought ten days ago."""
    return Purchase.objects.create(
        owner=purchase_owner,
        date=today - timedelta(days=10),
        store=hardware_store,
        category=tools,
        name='Шурупы',
        characteristic='4x40',
        quantity=Decimal('1'),
        unit=Unit.PACK,
        price=Decimal('250.00'),
    )


@pytest.fixture
def others_purchase(purchase_other_user, purchase_store, groceries, today):
    """A purchase recorded by the other member."""
    return Purchase.objects.create(
        owner=purchase_other_user,
        date=today,
        store=purchase_store,
        category=groceries,
        name='Хлеб',
        quantity=Decimal('1'),
        price=Decimal('45.00'),
    )
