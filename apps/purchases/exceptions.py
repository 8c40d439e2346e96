"""
Domain exceptions for purchases app.

This module defines the exception hierarchy for purchase-related errors.
Views translate service errors into 400 responses.
"""
from apps.categories.exceptions import InactiveCategoryError


class PurchaseServiceError(Exception):
    """Base exception for purchase service errors."""
    pass


class MissingReferenceDataError(PurchaseServiceError):
    """Raised when random purchases are requested but no stores or categories exist."""
    pass


__all__ = [
    'PurchaseServiceError',
    'MissingReferenceDataError',
    'InactiveCategoryError',
]
