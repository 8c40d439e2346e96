"""Sign-in for household members."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check email and password and stamp last_login.

    The row is locked so two simultaneous logins do not race on last_login.
    The same error is raised for an unknown email and a wrong password.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Password is right but the member is deactivated
    """
    user = User.objects.select_for_update().filter(email__iexact=email).first()

    if user is None or not user.check_password(password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    logger.info("Member %s signed in", user.id)
    return user
