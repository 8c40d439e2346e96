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
def category_user(db):
    """Create and return a household member."""
    return User.objects.create_user(
        email='categories@example.com',
        password='TestPass123!',
        display_name='Category Keeper',
    )


@pytest.fixture
def categories_client(api_client, category_user):
    """Return API client authenticated as the household member."""
    refresh = RefreshToken.for_user(category_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def groceries(db):
    return Category.objects.create(name='Продукты', icon='🛒', color='#FF6B6B', sort_order=10)


@pytest.fixture
def chemicals(db):
    return Category.objects.create(name='Химия', icon='🧴', color='#4ECDC4', sort_order=20)


@pytest.fixture
def inactive_category(db):
    return Category.objects.create(name='Старое', sort_order=5, is_active=False)


@pytest.fixture
def category_purchase(category_user, groceries):
    """Create a purchase in the groceries category."""
    locality = Locality.objects.create(town_ru='Москва', code='MSK')
    store = Store.objects.create(shop='Магнит', street='Садовая', house='3', locality=locality)
    return Purchase.objects.create(
        owner=category_user,
        date=timezone.localdate(),
        store=store,
        category=groceries,
        name='Хлеб',
        quantity=Decimal('1'),
        price=Decimal('45.00'),
    )
