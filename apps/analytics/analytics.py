"""
Analytics Module
=================

This module turns a set of purchases into the statistics shown on the
dashboard: totals, spending by category, by store, by month and by day,
and time series for charts.

Classes:
    StatisticsQueries: Static methods for the purchase statistics.

Key Features:
    - Summary totals (count, sum, average, extremes, covered period)
    - Category breakdown with share of spending
    - Store breakdown with visits and average receipt
    - Monthly and daily buckets with distinct categories and stores
    - Day / week / month trend series

Example:
    Getting statistics for one user's purchases::

        from apps.analytics.analytics import StatisticsQueries
        from apps.purchases.services import filter_purchases

        purchases = filter_purchases(owner=user, date_from=date(2025, 1, 1))
        summary = StatisticsQueries.summary(purchases)
        print(f"{summary['total_count']} purchases, {summary['total_amount']} total")

Note:
    Every method takes a purchases QuerySet that the caller has already
    scoped and filtered, and returns plain dictionaries or lists. Nothing
    here modifies data.
"""

from collections import defaultdict
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Sum, Count, Avg, Max, Min, Q
from django.utils import timezone
from django.utils.formats import date_format

from .exceptions import InvalidGranularityError


ZERO = Decimal('0.00')
TWO_PLACES = Decimal('0.01')

UNKNOWN_CATEGORY_ICON = '❓'
UNKNOWN_CATEGORY_COLOR = '#6c757d'

GRANULARITIES = ('day', 'week', 'month')


def _money(value):
    """Round an aggregate to two decimal places (None counts as zero)."""
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _week_start(day):
    """Sunday on or before the given date."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


# Bucket key for each trend granularity
TREND_KEYS = {
    'day': lambda day: day.isoformat(),
    'week': lambda day: _week_start(day).isoformat(),
    'month': lambda day: day.strftime('%Y-%m'),
}


def _new_bucket():
    return {
        'count': 0,
        'amount': ZERO,
        'categories': set(),
        'stores': set(),
    }


def _fill_buckets(purchases, key_func):
    """Group purchase rows into count/amount/distinct-category/distinct-store buckets."""
    buckets = defaultdict(_new_bucket)

    rows = purchases.order_by().values('date', 'amount', 'category_id', 'store_id')
    for row in rows:
        bucket = buckets[key_func(row['date'])]
        bucket['count'] += 1
        bucket['amount'] += row['amount']
        if row['category_id'] is not None:
            bucket['categories'].add(row['category_id'])
        bucket['stores'].add(row['store_id'])

    return buckets


class StatisticsQueries:
    """
    Aggregations over purchase records.

    Methods:
        summary: Totals for the whole set.
        category_stats: Spending per category.
        store_stats: Spending and visits per store.
        monthly_stats: Spending per calendar month.
        daily_stats: Spending per day over a recent window.
        trend: Count and amount per day, week or month.
        dashboard: Summary plus the category, store and monthly tables.

    Example:
        Dashboard data aggregation::

            purchases = filter_purchases(owner=request.user)
            data = StatisticsQueries.dashboard(purchases)

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def summary(purchases):
        """
        Calculate totals for a set of purchases.

        Args:
            purchases (QuerySet): Purchases to summarize.

        Returns:
            dict: Dictionary containing:
                - total_count (int): Number of purchases.
                - total_amount (Decimal): Sum of amounts.
                - avg_amount (Decimal): Mean amount per purchase.
                - categories_count (int): Distinct categories used.
                - stores_count (int): Distinct stores visited.
                - max_amount (Decimal | None): Largest purchase amount.
                - min_amount (Decimal | None): Smallest purchase amount.
                - period (dict | None): {'start': date, 'end': date} of the
                  first and last purchase.

        Example:
            ::

                stats = StatisticsQueries.summary(purchases)
                # {'total_count': 3, 'total_amount': Decimal('450.00'), ...}

        Note:
            With no purchases every count and amount is zero, while
            max_amount, min_amount and period are None.
        """
        totals = purchases.order_by().aggregate(
            total_count=Count('id'),
            total_amount=Sum('amount'),
            max_amount=Max('amount'),
            min_amount=Min('amount'),
            first_date=Min('date'),
            last_date=Max('date'),
            categories_count=Count('category', distinct=True),
            stores_count=Count('store', distinct=True),
        )

        total_count = totals['total_count']
        if not total_count:
            return {
                'total_count': 0,
                'total_amount': ZERO,
                'avg_amount': ZERO,
                'categories_count': 0,
                'stores_count': 0,
                'max_amount': None,
                'min_amount': None,
                'period': None,
            }

        total_amount = _money(totals['total_amount'])

        return {
            'total_count': total_count,
            'total_amount': total_amount,
            'avg_amount': _money(total_amount / total_count),
            'categories_count': totals['categories_count'],
            'stores_count': totals['stores_count'],
            'max_amount': _money(totals['max_amount']),
            'min_amount': _money(totals['min_amount']),
            'period': {
                'start': totals['first_date'],
                'end': totals['last_date'],
            },
        }

    @staticmethod
    def category_stats(purchases):
        """
        Break spending down by category.

        Purchases without a category are left out, and percentages are
        relative to the categorized total.

        Args:
            purchases (QuerySet): Purchases to group.

        Returns:
            list[dict]: One entry per category, largest amount first:
                - id (int), name (str), icon (str), color (str)
                - count (int): Number of purchases.
                - amount (Decimal): Sum of amounts.
                - avg_price (Decimal): Mean unit price over purchases with
                  a positive price.
                - percentage (float): Share of the total amount, 0-100.
        """
        rows = (
            purchases
            .filter(category__isnull=False)
            .order_by()
            .values('category_id', 'category__name', 'category__icon', 'category__color')
            .annotate(
                count=Count('id'),
                amount=Sum('amount'),
                avg_price=Avg('price', filter=Q(price__gt=0)),
            )
        )

        stats = []
        for row in rows:
            stats.append({
                'id': row['category_id'],
                'name': row['category__name'] or f"Категория #{row['category_id']}",
                'icon': row['category__icon'] or UNKNOWN_CATEGORY_ICON,
                'color': row['category__color'] or UNKNOWN_CATEGORY_COLOR,
                'count': row['count'],
                'amount': _money(row['amount']),
                'avg_price': _money(row['avg_price']),
            })

        total = sum((item['amount'] for item in stats), ZERO)
        for item in stats:
            item['percentage'] = float(round(item['amount'] / total * 100, 2)) if total else 0.0

        stats.sort(key=lambda item: (-item['amount'], item['name']))
        return stats

    @staticmethod
    def store_stats(purchases):
        """
        Break spending down by store.

        A visit is a distinct purchase date at the store, so the average
        receipt is the store total divided by the number of visits.

        Returns:
            list[dict]: One entry per store, largest amount first, with
            id, name, address, count, amount, visits_count and avg_receipt.
        """
        rows = (
            purchases
            .order_by()
            .values('store_id', 'store__shop', 'store__street', 'store__house')
            .annotate(
                count=Count('id'),
                amount=Sum('amount'),
                visits_count=Count('date', distinct=True),
            )
        )

        stats = []
        for row in rows:
            amount = _money(row['amount'])
            visits = row['visits_count']
            stats.append({
                'id': row['store_id'],
                'name': row['store__shop'] or f"Магазин #{row['store_id']}",
                'address': f"{row['store__street']}, {row['store__house']}",
                'count': row['count'],
                'amount': amount,
                'visits_count': visits,
                'avg_receipt': _money(amount / visits) if visits else ZERO,
            })

        stats.sort(key=lambda item: (-item['amount'], item['name']))
        return stats

    @staticmethod
    def monthly_stats(purchases):
        """
        Group purchases by calendar month.

        Returns:
            list[dict]: Months in chronological order, each with:
                - key (str): 'YYYY-MM'
                - name (str): Localized month name and year
                - count, amount, categories_count, stores_count
        """
        buckets = _fill_buckets(purchases, lambda day: day.replace(day=1))

        stats = []
        for month in sorted(buckets):
            bucket = buckets[month]
            stats.append({
                'key': month.strftime('%Y-%m'),
                'name': date_format(month, 'F Y'),
                'count': bucket['count'],
                'amount': _money(bucket['amount']),
                'categories_count': len(bucket['categories']),
                'stores_count': len(bucket['stores']),
            })
        return stats

    @staticmethod
    def daily_stats(purchases, days=30, today=None):
        """
        Group recent purchases by day.

        Args:
            purchases (QuerySet): Purchases to group.
            days (int): Window length, including today. Defaults to 30.
            today (date, optional): End of the window. Defaults to today.

        Returns:
            list[dict]: Days with at least one purchase, oldest first, each
            with date, count, amount, categories_count and stores_count.
        """
        today = today or timezone.localdate()
        start = today - timedelta(days=days - 1)
        recent = purchases.filter(date__gte=start, date__lte=today)

        buckets = _fill_buckets(recent, lambda day: day)

        return [
            {
                'date': day,
                'count': buckets[day]['count'],
                'amount': _money(buckets[day]['amount']),
                'categories_count': len(buckets[day]['categories']),
                'stores_count': len(buckets[day]['stores']),
            }
            for day in sorted(buckets)
        ]

    @staticmethod
    def trend(purchases, granularity='month'):
        """
        Build a time series of purchase counts and amounts.

        Args:
            purchases (QuerySet): Purchases to aggregate.
            granularity (str): 'day', 'week' or 'month'. Weeks start on
                Sunday and are keyed by that Sunday's date.

        Returns:
            list[dict]: Points sorted by key, each with key, count, amount.

        Raises:
            InvalidGranularityError: If granularity is not supported.

        Example:
            ::

                StatisticsQueries.trend(purchases, granularity='week')
                # [{'key': '2025-01-05', 'count': 4, 'amount': Decimal('812.40')}, ...]
        """
        key_func = TREND_KEYS.get(granularity)
        if key_func is None:
            raise InvalidGranularityError(
                f"Invalid granularity: '{granularity}'. Valid options: {', '.join(GRANULARITIES)}"
            )

        buckets = _fill_buckets(purchases, key_func)

        return [
            {
                'key': key,
                'count': buckets[key]['count'],
                'amount': _money(buckets[key]['amount']),
            }
            for key in sorted(buckets)
        ]

    @staticmethod
    def dashboard(purchases):
        """Summary, category, store and monthly statistics in one payload."""
        return {
            'summary': StatisticsQueries.summary(purchases),
            'categories': StatisticsQueries.category_stats(purchases),
            'stores': StatisticsQueries.store_stats(purchases),
            'monthly': StatisticsQueries.monthly_stats(purchases),
        }
