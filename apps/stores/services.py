"""Services for cities and stores."""

import logging
from typing import Optional

from django.db import transaction
from django.db.models import Count, QuerySet

from .exceptions import LocalityInUseError, StoreInUseError
from .models import Locality, Store

logger = logging.getLogger(__name__)


def list_localities() -> QuerySet[Locality]:
    """All cities ordered by name, with the number of stores in each."""
    return Locality.objects.annotate(stores_count=Count('stores')).order_by('town_ru')


def list_stores(*, locality_id: Optional[int] = None) -> QuerySet[Store]:
    """
    Stores ordered by name.

    Args:
        locality_id: Only stores located in this city

    Returns:
        QuerySet of Store with locality preloaded
    """
    queryset = Store.objects.select_related('locality').order_by('shop')
    if locality_id:
        queryset = queryset.filter(locality_id=locality_id)
    return queryset


@transaction.atomic
def create_locality(*, town_ru: str, code: str, town_en: str = '') -> Locality:
    locality = Locality.objects.create(town_ru=town_ru, town_en=town_en, code=code)
    logger.info("Created city %s (%s)", locality.id, locality.town_ru)
    return locality


@transaction.atomic
def delete_locality(*, locality: Locality) -> None:
    """
    Delete a city.

    Raises:
        LocalityInUseError: If any store is still located in the city
    """
    if locality.stores.exists():
        logger.warning("Refused to delete city %s: stores exist", locality.id)
        raise LocalityInUseError(
            "Cannot delete city with existing stores. Delete stores first."
        )
    locality_id = locality.id
    locality.delete()
    logger.info("Deleted city %s", locality_id)


@transaction.atomic
def create_store(
    *,
    shop: str,
    street: str,
    house: str,
    locality: Locality,
    phone: str = ''
) -> Store:
    store = Store.objects.create(
        shop=shop,
        street=street,
        house=house,
        phone=phone,
        locality=locality,
    )
    logger.info("Created store %s (%s)", store.id, store.shop)
    return store


@transaction.atomic
def update_instance(instance, **fields):
    """Apply validated field values to a city or store and save it."""
    for field, value in fields.items():
        setattr(instance, field, value)
    instance.save()
    logger.info("Updated %s %s", instance._meta.model_name, instance.pk)
    return instance


@transaction.atomic
def delete_store(*, store: Store) -> None:
    """
    Delete a store.

    Raises:
        StoreInUseError: If any purchase references the store
    """
    if store.purchases.exists():
        logger.warning("Refused to delete store %s: purchases exist", store.id)
        raise StoreInUseError(
            "Cannot delete store with existing purchases. Delete purchases first."
        )
    store_id = store.id
    store.delete()
    logger.info("Deleted store %s", store_id)
