import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from django.utils import timezone
from apps.accounts.models import User
from apps.categories.models import Category
from apps.purchases.models import Purchase
from apps.stores.models import Locality, Store


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def store_user(db):
    """Create and return a household member."""
    return User.objects.create_user(
        email='stores@example.com',
        password='TestPass123!',
        display_name='Store Keeper',
    )


@pytest.fixture
def stores_client(api_client, store_user):
    """Return API client authenticated as the household member."""
    refresh = RefreshToken.for_user(store_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def moscow(db):
    return Locality.objects.create(town_ru='Москва', town_en='Moscow', code='MSK')


@pytest.fixture
def tver(db):
    return Locality.objects.create(town_ru='Тверь', town_en='Tver', code='TVR')


@pytest.fixture
def store(moscow):
    """Create and return a store in Moscow."""
    return Store.objects.create(
        shop='Пятёрочка',
        street='Ленина',
        house='12',
        locality=moscow,
    )


@pytest.fixture
def tver_store(tver):
    """Create and return a store in Tver with a legacy placeholder address."""
    return Store.objects.create(
        shop='Строймаркет',
        street='Empty',
        house='Empty',
        locality=tver,
    )


@pytest.fixture
def store_purchase(store_user, store):
    """Create a purchase that keeps the store referenced."""
    category = Category.objects.create(name='Продукты')
    return Purchase.objects.create(
        owner=store_user,
        date=timezone.localdate(),
        store=store,
        category=category,
        name='Молоко',
        quantity=Decimal('2'),
        price=Decimal('89.90'),
    )
