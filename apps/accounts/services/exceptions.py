"""
Domain exceptions for accounts services.

Views map them to HTTP responses:
    UserRegistrationError   -> 400
    InvalidCredentialsError -> 401
    InactiveAccountError    -> 403
"""


class AccountsServiceError(Exception):
    pass


class UserRegistrationError(AccountsServiceError):
    """Email already belongs to a member."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    pass


class InactiveAccountError(AccountsServiceError):
    """Member was deactivated by an administrator."""
    pass
