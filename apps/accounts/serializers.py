"""
Serializers for accounts app.

Input Serializers:
    RegistrationInputSerializer - New household member
    LoginInputSerializer - Email and password
    LogoutInputSerializer - Optional refresh token

Model Serializers:
    UserSerializer - Public profile
    ProfileSerializer - Profile of the signed-in member with purchase totals

Response Serializers:
    AuthResponseSerializer - Profile plus a JWT pair
"""

from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from .models import User


# =============================================================================
# Input Serializers
# =============================================================================

class RegistrationInputSerializer(serializers.Serializer):
    """Email uniqueness is enforced by register_user()."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(write_only=True, style={'input_type': 'password'})
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs['password'] != attrs.pop('password_confirm'):
            raise serializers.ValidationError({'password_confirm': 'Passwords do not match'})
        return attrs


class LoginInputSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class LogoutInputSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, help_text='Refresh token issued at login')


# =============================================================================
# Model Serializers
# =============================================================================

class UserSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'display_name', 'created_at', 'last_login']
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class ProfileSerializer(UserSerializer):
    """Signed-in member with the number of purchases recorded so far."""

    purchases_count = serializers.SerializerMethodField()

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['purchases_count']

    def get_purchases_count(self, obj) -> int:
        return obj.purchases.count()


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class TokenPairSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokenPairSerializer()


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
