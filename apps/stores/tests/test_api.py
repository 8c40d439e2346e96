import pytest
from django.urls import reverse
from rest_framework import status
from apps.stores.models import Locality, Store


# =============================================================================
# City Tests
# =============================================================================

@pytest.mark.django_db
class TestCityList:
    """Tests for GET /api/cities/"""

    def test_list_cities_ordered_by_name(self, stores_client, moscow, tver):
        url = reverse('stores:city-list')
        response = stores_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [city['town_ru'] for city in response.data] == ['Москва', 'Тверь']

    def test_list_cities_includes_stores_count(self, stores_client, store, tver):
        url = reverse('stores:city-list')
        response = stores_client.get(url)

        counts = {city['code']: city['stores_count'] for city in response.data}
        assert counts == {'MSK': 1, 'TVR': 0}

    def test_list_cities_unauthenticated(self, api_client):
        url = reverse('stores:city-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCityCreate:
    """Tests for POST /api/cities/"""

    def test_create_city(self, stores_client):
        url = reverse('stores:city-list')
        response = stores_client.post(url, {'town_ru': 'Клин', 'code': 'KLN'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['town_ru'] == 'Клин'
        assert response.data['town_en'] == ''
        assert response.data['stores_count'] == 0
        assert Locality.objects.filter(code='KLN').exists()

    def test_create_city_requires_name(self, stores_client):
        url = reverse('stores:city-list')
        response = stores_client.post(url, {'code': 'KLN'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'town_ru' in response.data


@pytest.mark.django_db
class TestCityUpdateDelete:
    """Tests for PATCH/DELETE /api/cities/{id}/"""

    def test_update_city(self, stores_client, moscow):
        url = reverse('stores:city-detail', args=[moscow.id])
        response = stores_client.patch(url, {'town_en': 'Moskva'})

        assert response.status_code == status.HTTP_200_OK
        moscow.refresh_from_db()
        assert moscow.town_en == 'Moskva'

    def test_delete_empty_city(self, stores_client, tver):
        url = reverse('stores:city-detail', args=[tver.id])
        response = stores_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Locality.objects.filter(id=tver.id).exists()

    def test_cannot_delete_city_with_stores(self, stores_client, store, moscow):
        url = reverse('stores:city-detail', args=[moscow.id])
        response = stores_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == (
            'Cannot delete city with existing stores. Delete stores first.'
        )
        assert Locality.objects.filter(id=moscow.id).exists()

    def test_city_stores_action(self, stores_client, store, tver_store, moscow):
        url = reverse('stores:city-stores', args=[moscow.id])
        response = stores_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [s['id'] for s in response.data] == [store.id]


# =============================================================================
# Store Tests
# =============================================================================

@pytest.mark.django_db
class TestStoreList:
    """Tests for GET /api/stores/"""

    def test_list_stores(self, stores_client, store, tver_store):
        url = reverse('stores:store-list')
        response = stores_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

    def test_list_stores_includes_addresses(self, stores_client, store):
        url = reverse('stores:store-list')
        response = stores_client.get(url)

        data = response.data[0]
        assert data['city_name'] == 'Москва'
        assert data['address'] == 'Ленина, 12'
        assert data['full_address'] == 'Москва, ул. Ленина, д. 12'

    def test_placeholder_address_is_skipped(self, stores_client, tver_store):
        url = reverse('stores:store-detail', args=[tver_store.id])
        response = stores_client.get(url)

        assert response.data['full_address'] == 'Тверь'

    def test_filter_by_locality(self, stores_client, store, tver_store, tver):
        url = reverse('stores:store-list')
        response = stores_client.get(url, {'locality': tver.id})

        assert [s['id'] for s in response.data] == [tver_store.id]

    def test_invalid_locality_filter(self, stores_client):
        url = reverse('stores:store-list')
        response = stores_client.get(url, {'locality': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestStoreCreate:
    """Tests for POST /api/stores/"""

    def test_create_store(self, stores_client, moscow):
        url = reverse('stores:store-list')
        data = {
            'shop': 'Магнит',
            'street': 'Садовая',
            'house': '3А',
            'locality': moscow.id,
        }
        response = stores_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['full_address'] == 'Москва, ул. Садовая, д. 3А'
        assert Store.objects.filter(shop='Магнит').exists()

    def test_create_store_unknown_city(self, stores_client):
        url = reverse('stores:store-list')
        data = {
            'shop': 'Магнит',
            'street': 'Садовая',
            'house': '3А',
            'locality': 9999,
        }
        response = stores_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'locality' in response.data

    def test_create_store_missing_fields(self, stores_client, moscow):
        url = reverse('stores:store-list')
        response = stores_client.post(url, {'shop': 'Магнит', 'locality': moscow.id})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'street' in response.data
        assert 'house' in response.data


@pytest.mark.django_db
class TestStoreUpdateDelete:
    """Tests for PATCH/DELETE /api/stores/{id}/"""

    def test_move_store_to_other_city(self, stores_client, store, tver):
        url = reverse('stores:store-detail', args=[store.id])
        response = stores_client.patch(url, {'locality': tver.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['city_name'] == 'Тверь'

    def test_delete_unused_store(self, stores_client, store):
        url = reverse('stores:store-detail', args=[store.id])
        response = stores_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Store.objects.filter(id=store.id).exists()

    def test_cannot_delete_store_with_purchases(self, stores_client, store, store_purchase):
        url = reverse('stores:store-detail', args=[store.id])
        response = stores_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == (
            'Cannot delete store with existing purchases. Delete purchases first.'
        )
        assert Store.objects.filter(id=store.id).exists()
