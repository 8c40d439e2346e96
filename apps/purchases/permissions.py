"""
Custom permission classes for purchases app.

Purchases are private to the household member who recorded them.
"""
from rest_framework.permissions import BasePermission


class IsPurchaseOwner(BasePermission):
    """
    Object-level permission: only the owner may view or change a purchase.

    Usage:
        permission_classes = [IsAuthenticated, IsPurchaseOwner]
    """

    message = 'You can only access your own purchases.'

    def has_object_permission(self, request, view, obj):
        return obj.owner_id == request.user.id
