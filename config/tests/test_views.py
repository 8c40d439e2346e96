import pytest
from unittest import mock
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_healthy(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'ok'}

    def test_database_down(self, api_client):
        with mock.patch('config.views.connection.cursor', side_effect=DatabaseError('down')):
            response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()['database'] == 'error'


@pytest.mark.django_db
class TestApiSchema:
    """The OpenAPI schema builds for every endpoint."""

    def test_schema(self, api_client):
        response = api_client.get(reverse('api-schema'))

        assert response.status_code == status.HTTP_200_OK


def test_unknown_url_returns_json(client):
    response = client.get('/definitely/not/here/')

    assert response.status_code == 404
    assert response.json()['error'] == 'Not found'
