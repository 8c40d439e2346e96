"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    StatisticsQuerySerializer - Purchase filters plus a YYYY-MM period shortcut
    DailyQuerySerializer - Adds the window length for daily statistics
    TrendQuerySerializer - Adds the trend granularity

Response Serializers:
    SummarySerializer - Totals for the filtered purchases
    CategoryStatSerializer - One category bucket
    StoreStatSerializer - One store bucket
    MonthlyStatSerializer - One month bucket
    DailyStatSerializer - One day bucket
    TrendPointSerializer - One point of a trend series
    DashboardResponseSerializer - Summary and the three tables
"""

from rest_framework import serializers
from django.conf import settings
from datetime import datetime, timedelta
from apps.purchases.serializers import PurchaseFilterSerializer
from .analytics import GRANULARITIES


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class StatisticsQuerySerializer(PurchaseFilterSerializer):
    """
    Validate statistics query parameters.

    Used by: every analytics endpoint

    Query Parameters:
        category, store, date_from, date_to, search: Same as the purchase list
        period (str): Month in YYYY-MM format (e.g., '2025-01')

    Note:
        If 'period' is provided, it takes precedence and is converted
        to date_from and date_to for the full month.
    """

    period = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )

    def validate(self, attrs):
        """Parse period into date range if provided."""
        period = attrs.pop('period', None)

        if period:
            try:
                year, month = period.split('-')
                year, month = int(year), int(month)
                attrs['date_from'] = datetime(year, month, 1).date()
                # Last day of month
                if month == 12:
                    attrs['date_to'] = datetime(year + 1, 1, 1).date() - timedelta(days=1)
                else:
                    attrs['date_to'] = datetime(year, month + 1, 1).date() - timedelta(days=1)
            except (ValueError, AttributeError):
                raise serializers.ValidationError({
                    'period': 'Invalid period format. Use YYYY-MM'
                })

        return super().validate(attrs)


class DailyQuerySerializer(StatisticsQuerySerializer):
    """
    Validate query parameters for daily statistics.

    Query Parameters:
        days (int): Window length including today (1-366)
    """

    days = serializers.IntegerField(
        min_value=1,
        max_value=366,
        required=False,
        help_text='Number of days including today (1-366)'
    )

    def validate(self, attrs):
        attrs = super().validate(attrs)
        attrs.setdefault('days', settings.ANALYTICS_DAILY_WINDOW_DAYS)
        return attrs


class TrendQuerySerializer(StatisticsQuerySerializer):
    """
    Validate query parameters for the trend series.

    Query Parameters:
        granularity (str): 'day', 'week' or 'month'
    """

    granularity = serializers.ChoiceField(
        choices=GRANULARITIES,
        default='month',
        help_text="Time period grouping: 'day', 'week', or 'month'"
    )


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class PeriodSerializer(serializers.Serializer):
    start = serializers.DateField()
    end = serializers.DateField()


class SummarySerializer(serializers.Serializer):
    total_count = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    avg_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    categories_count = serializers.IntegerField()
    stores_count = serializers.IntegerField()
    max_amount = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    min_amount = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    period = PeriodSerializer(allow_null=True)


class CategoryStatSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    icon = serializers.CharField()
    color = serializers.CharField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    avg_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    percentage = serializers.FloatField()


class StoreStatSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    address = serializers.CharField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    visits_count = serializers.IntegerField()
    avg_receipt = serializers.DecimalField(max_digits=14, decimal_places=2)


class MonthlyStatSerializer(serializers.Serializer):
    key = serializers.CharField()
    name = serializers.CharField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    categories_count = serializers.IntegerField()
    stores_count = serializers.IntegerField()


class DailyStatSerializer(serializers.Serializer):
    date = serializers.DateField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    categories_count = serializers.IntegerField()
    stores_count = serializers.IntegerField()


class TrendPointSerializer(serializers.Serializer):
    key = serializers.CharField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class DashboardResponseSerializer(serializers.Serializer):
    summary = SummarySerializer()
    categories = CategoryStatSerializer(many=True)
    stores = StoreStatSerializer(many=True)
    monthly = MonthlyStatSerializer(many=True)
