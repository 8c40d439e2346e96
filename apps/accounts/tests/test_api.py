import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


REGISTER_PAYLOAD = {
    'email': 'anna@example.com',
    'password': 'KitchenScale42!',
    'password_confirm': 'KitchenScale42!',
    'display_name': 'Anna',
}


# =============================================================================
# Registration
# =============================================================================

@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/auth/register/"""

    def test_returns_profile_and_tokens(self, api_client):
        response = api_client.post(reverse('users:register'), REGISTER_PAYLOAD)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Registration successful'
        assert response.data['user']['display_name'] == 'Anna'
        assert set(response.data['tokens']) == {'refresh', 'access'}

        user = User.objects.get(email='anna@example.com')
        assert user.check_password('KitchenScale42!')

    def test_display_name_is_optional(self, api_client):
        payload = {k: v for k, v in REGISTER_PAYLOAD.items() if k != 'display_name'}
        response = api_client.post(reverse('users:register'), payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='anna@example.com').get_display_name() == 'anna'

    def test_email_taken_in_other_case(self, api_client, user):
        payload = dict(REGISTER_PAYLOAD, email='TESTUSER@example.com')
        response = api_client.post(reverse('users:register'), payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    @pytest.mark.parametrize('override, field', [
        ({'password_confirm': 'SomethingElse42!'}, 'password_confirm'),
        ({'password': '123', 'password_confirm': '123'}, 'password'),
        ({'email': 'not-an-email'}, 'email'),
    ])
    def test_invalid_input(self, api_client, override, field):
        response = api_client.post(reverse('users:register'), dict(REGISTER_PAYLOAD, **override))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data
        assert not User.objects.exists()


# =============================================================================
# Login / logout
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def _login(self, client, email, password='TestPass123!'):
        return client.post(reverse('users:login'), {'email': email, 'password': password})

    def test_success(self, api_client, user):
        response = self._login(api_client, user.email)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['email'] == user.email
        assert 'access' in response.data['tokens']

    def test_records_last_login(self, api_client, user):
        assert user.last_login is None

        self._login(api_client, user.email)

        user.refresh_from_db()
        assert user.last_login is not None

    def test_email_is_case_insensitive(self, api_client, user):
        response = self._login(api_client, 'TestUser@Example.com')

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize('email, password', [
        ('testuser@example.com', 'WrongPassword1!'),
        ('nobody@example.com', 'TestPass123!'),
    ])
    def test_bad_credentials(self, api_client, user, email, password):
        response = self._login(api_client, email, password)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_inactive_account(self, api_client, user_inactive):
        response = self._login(api_client, user_inactive.email)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Account is deactivated'

    def test_refresh_token_issues_new_access(self, api_client, user):
        tokens = self._login(api_client, user.email).data['tokens']

        response = api_client.post(reverse('token_refresh'), {'refresh': tokens['refresh']})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_without_token(self, authenticated_client):
        response = authenticated_client.post(reverse('users:logout'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Logout successful'

    def test_with_garbage_refresh_token(self, authenticated_client):
        response = authenticated_client.post(reverse('users:logout'), {'refresh': 'not-a-token'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client):
        response = api_client.post(reverse('users:logout'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Profile
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for GET /api/auth/user/ and PATCH /api/auth/user/update/"""

    def test_current_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['purchases_count'] == 0

    def test_current_user_requires_authentication(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_rename(self, authenticated_client, user):
        response = authenticated_client.patch(
            reverse('users:update-profile'),
            {'display_name': 'Kitchen Boss'},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['display_name'] == 'Kitchen Boss'
        user.refresh_from_db()
        assert user.display_name == 'Kitchen Boss'

    def test_email_is_read_only(self, authenticated_client, user):
        authenticated_client.patch(reverse('users:update-profile'), {'email': 'other@example.com'})

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'


# =============================================================================
# User model
# =============================================================================

@pytest.mark.django_db
class TestUserModel:
    """Tests for User and UserManager."""

    def test_email_is_required(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')

    def test_email_domain_is_normalized(self):
        user = User.objects.create_user(email='Pasha@EXAMPLE.COM', password='TestPass123!')

        assert user.email == 'Pasha@example.com'

    def test_superuser_flags(self):
        admin = User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')

        assert admin.is_staff
        assert admin.is_superuser

    def test_display_name_falls_back_to_email(self, user):
        assert user.get_display_name() == 'Test User'

        user.display_name = ''
        assert user.get_display_name() == 'testuser'
