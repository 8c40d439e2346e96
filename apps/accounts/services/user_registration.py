"""User registration service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Register a new household member.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError(f"User with email '{email}' already exists")

    user = User.objects.create_user(
        email=email,
        password=password,
        display_name=display_name
    )

    logger.info("Registered user %s", user.id)
    return user
