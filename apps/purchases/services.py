"""
Purchase services.

Business logic for recording purchases, filtering a user's purchase
history, exporting it, and maintaining data (random test data and
linking of legacy free-text categories).
"""
import logging
import random
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.categories.models import Category
from apps.categories.services import get_or_create_category
from apps.stores.models import Store
from .exceptions import InactiveCategoryError, MissingReferenceDataError
from .models import Purchase, Unit, calculate_amount

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    'Молоко', 'Хлеб', 'Яйца', 'Сахар', 'Масло', 'Сыр', 'Колбаса',
    'Порошок', 'Мыло', 'Шампунь', 'Губки', 'Салфетки', 'Пакеты',
    'Гвозди', 'Шурупы', 'Краска', 'Кисть', 'Провод', 'Лампа', 'Розетка',
]

DEFAULT_LEGACY_CATEGORY = 'Продукты'


# =============================================================================
# Querying
# =============================================================================

def filter_purchases(
    *,
    owner,
    category: Optional[int] = None,
    store: Optional[int] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    search: Optional[str] = None,
) -> QuerySet[Purchase]:
    """
    A user's purchases narrowed by the standard filters.

    Args:
        owner: User whose purchases are returned
        category: Category ID
        store: Store ID
        date_from: Earliest purchase date (inclusive)
        date_to: Latest purchase date (inclusive)
        search: Case-insensitive substring of name or characteristic

    Returns:
        QuerySet ordered newest first, with store, city and category joined
    """
    queryset = (
        Purchase.objects
        .filter(owner=owner)
        .select_related('store__locality', 'category')
        .order_by('-date', '-created_at')
    )

    if category:
        queryset = queryset.filter(category_id=category)
    if store:
        queryset = queryset.filter(store_id=store)
    if date_from:
        queryset = queryset.filter(date__gte=date_from)
    if date_to:
        queryset = queryset.filter(date__lte=date_to)
    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(characteristic__icontains=search)
        )

    return queryset


# =============================================================================
# Create / update / delete
# =============================================================================

@transaction.atomic
def create_purchase(
    *,
    owner,
    date: date,
    store: Store,
    category: Category,
    name: str,
    price: Decimal,
    quantity: Decimal,
    unit: str = Unit.PIECE,
    characteristic: str = '',
    amount: Optional[Decimal] = None,
) -> Purchase:
    """
    Record a purchase.

    Args:
        owner: User recording the purchase
        date: Purchase date
        store: Store where it was bought
        category: Active category
        name: Product name
        price: Unit price
        quantity: Number of units
        unit: Unit of measure
        characteristic: Optional details (brand, size...)
        amount: Line total; price * quantity when omitted

    Returns:
        Created Purchase instance

    Raises:
        InactiveCategoryError: If the category has been deactivated
    """
    if not category.is_active:
        raise InactiveCategoryError(f"Category '{category.name}' is not active")

    if amount is None:
        amount = calculate_amount(price, quantity)

    purchase = Purchase.objects.create(
        owner=owner,
        date=date,
        store=store,
        category=category,
        name=name,
        characteristic=characteristic,
        quantity=quantity,
        unit=unit,
        price=price,
        amount=amount,
    )

    logger.info("Created purchase %s for user %s (%s)", purchase.id, owner.id, purchase.amount)
    return purchase


@transaction.atomic
def update_purchase(*, purchase: Purchase, **fields) -> Purchase:
    """
    Update a purchase.

    When price or quantity changes and no amount is supplied, the amount
    is recalculated. A deactivated category may be kept but not newly
    assigned.

    Raises:
        InactiveCategoryError: If switching to a deactivated category
    """
    category = fields.get('category')
    if category is not None and not category.is_active and category.id != purchase.category_id:
        raise InactiveCategoryError(f"Category '{category.name}' is not active")

    recalculate = 'amount' not in fields and ('price' in fields or 'quantity' in fields)

    for field, value in fields.items():
        setattr(purchase, field, value)

    if recalculate or purchase.amount is None:
        purchase.amount = calculate_amount(purchase.price, purchase.quantity)

    purchase.save()
    logger.info("Updated purchase %s", purchase.id)
    return purchase


@transaction.atomic
def delete_purchase(*, purchase: Purchase) -> None:
    purchase_id = purchase.id
    purchase.delete()
    logger.info("Deleted purchase %s", purchase_id)


# =============================================================================
# Data maintenance
# =============================================================================

@transaction.atomic
def generate_random_purchases(
    *,
    owner,
    count: int,
    days: int = 365,
    rng: Optional[random.Random] = None,
) -> list:
    """
    Insert random purchases spread over the last `days` days.

    Stores and active categories are picked from existing reference data.
    Prices fall in 5.00-500.00 and quantities in 0.1-10.0.

    Raises:
        MissingReferenceDataError: If there are no stores or no active categories
    """
    rng = rng or random.Random()

    stores = list(Store.objects.all())
    categories = list(Category.objects.filter(is_active=True))
    if not stores or not categories:
        raise MissingReferenceDataError(
            "At least one store and one active category are required"
        )

    units = [choice for choice, _ in Unit.choices]
    today = timezone.localdate()
    purchases = []

    for _ in range(count):
        price = Decimal(rng.randint(500, 50000)) / 100
        quantity = Decimal(rng.randint(1, 100)) / 10
        purchases.append(Purchase(
            owner=owner,
            date=today - timedelta(days=rng.randint(0, days)),
            store=rng.choice(stores),
            category=rng.choice(categories),
            name=rng.choice(SAMPLE_PRODUCTS),
            quantity=quantity,
            unit=rng.choice(units),
            price=price,
            amount=calculate_amount(price, quantity),
        ))

    created = Purchase.objects.bulk_create(purchases)
    logger.info("Generated %d random purchases for user %s", len(created), owner.id)
    return created


@transaction.atomic
def link_legacy_categories(
    *,
    default_category_name: str = DEFAULT_LEGACY_CATEGORY,
    dry_run: bool = False,
) -> dict:
    """
    Assign categories to imported purchases that have none.

    Purchases whose legacy group name matches an existing category are
    linked to it. Everything still uncategorized goes to the default
    category, which is created when missing.

    Args:
        default_category_name: Category for purchases with no match
        dry_run: Only count, never write

    Returns:
        Dict with linked, defaulted, with_category, without_category
        and unique_legacy_groups
    """
    uncategorized = Purchase.objects.filter(category__isnull=True)

    # Spellings of each legacy group, keyed case-insensitively
    spellings = defaultdict(set)
    names = (
        Purchase.objects
        .exclude(legacy_group='')
        .order_by()
        .values_list('legacy_group', flat=True)
        .distinct()
    )
    for name in names:
        spellings[name.casefold()].add(name)
    legacy_groups = sorted(min(variants) for variants in spellings.values())

    categories = {}
    for category in Category.objects.order_by('id'):
        categories.setdefault(category.name.casefold(), category)

    linked = 0
    for key, variants in spellings.items():
        category = categories.get(key)
        if category is None:
            continue
        matching = uncategorized.filter(legacy_group__in=variants)
        if dry_run:
            linked += matching.count()
        else:
            linked += matching.update(category=category)

    if dry_run:
        defaulted = max(uncategorized.count() - linked, 0)
    else:
        defaulted = 0
        if uncategorized.exists():
            default_category, created = get_or_create_category(name=default_category_name)
            if created:
                logger.info("Created default category '%s'", default_category_name)
            defaulted = uncategorized.update(category=default_category)

    total = Purchase.objects.count()
    without_category = Purchase.objects.filter(category__isnull=True).count()

    logger.info(
        "Legacy category linking%s: linked=%d defaulted=%d",
        ' (dry run)' if dry_run else '', linked, defaulted
    )

    return {
        'linked': linked,
        'defaulted': defaulted,
        'with_category': total - without_category,
        'without_category': without_category,
        'unique_legacy_groups': legacy_groups,
    }
