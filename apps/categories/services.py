"""Category management service."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from .models import Category

logger = logging.getLogger(__name__)


def list_categories(*, include_inactive: bool = False) -> QuerySet[Category]:
    """
    Categories ordered by sort order, then name.

    Args:
        include_inactive: Also return deactivated categories

    Returns:
        QuerySet of Category
    """
    queryset = Category.objects.order_by('sort_order', 'name')
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    return queryset


@transaction.atomic
def create_category(*, name: str, **fields) -> Category:
    category = Category.objects.create(name=name, **fields)
    logger.info("Created category %s (%s)", category.id, category.name)
    return category


@transaction.atomic
def update_category(*, category: Category, **fields) -> Category:
    for field, value in fields.items():
        setattr(category, field, value)
    category.save()
    logger.info("Updated category %s", category.id)
    return category


@transaction.atomic
def remove_category(*, category: Category) -> bool:
    """
    Remove a category.

    A category still referenced by purchases is deactivated so that
    existing purchases keep it. Unused categories are deleted.

    Returns:
        True if the category was deactivated, False if it was deleted
    """
    category_id = category.id

    if category.purchases.exists():
        category.is_active = False
        category.save(update_fields=['is_active', 'updated_at'])
        logger.info("Deactivated category %s: purchases exist", category_id)
        return True

    category.delete()
    logger.info("Deleted category %s", category_id)
    return False


def get_or_create_category(*, name: str) -> tuple:
    """Find a category by name (case-insensitive) or create an active one."""
    category = Category.objects.filter(name__iexact=name).order_by('id').first()
    if category:
        return category, False
    return create_category(name=name), True
