from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.http import HttpResponse
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.purchases.services import filter_purchases
from .analytics import StatisticsQueries
from .exports import CSV_REPORTS, render_csv_report
from .serializers import (
    # Input serializers
    StatisticsQuerySerializer,
    DailyQuerySerializer,
    TrendQuerySerializer,
    # Response serializers
    SummarySerializer,
    CategoryStatSerializer,
    StoreStatSerializer,
    MonthlyStatSerializer,
    DailyStatSerializer,
    TrendPointSerializer,
    DashboardResponseSerializer,
)
from .exceptions import InvalidReportError


FILTER_PARAMETERS = [
    OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM), overrides dates'),
    OpenApiParameter('date_from', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
    OpenApiParameter('date_to', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
    OpenApiParameter('category', OpenApiTypes.INT, description='Only this category'),
    OpenApiParameter('store', OpenApiTypes.INT, description='Only this store'),
    OpenApiParameter('search', OpenApiTypes.STR, description='Product name or characteristic contains'),
]


def _validated_params(request, serializer_class=StatisticsQuerySerializer):
    query_serializer = serializer_class(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    return dict(query_serializer.validated_data)


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: SummarySerializer},
    description="Totals for the current user's purchases.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Get purchase totals - thin HTTP handler."""
    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.summary(purchases))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: CategoryStatSerializer(many=True)},
    description="Spending per category, largest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def category_stats(request):
    """Get spending per category."""
    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.category_stats(purchases))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: StoreStatSerializer(many=True)},
    description="Spending, visits and average receipt per store, largest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def store_stats(request):
    """Get spending per store."""
    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.store_stats(purchases))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: MonthlyStatSerializer(many=True)},
    description="Spending per calendar month in chronological order.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def monthly_stats(request):
    """Get spending per month."""
    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.monthly_stats(purchases))


@extend_schema(
    parameters=FILTER_PARAMETERS + [
        OpenApiParameter('days', OpenApiTypes.INT, description='Days including today (1-366, default 30)'),
    ],
    responses={200: DailyStatSerializer(many=True)},
    description="Spending per day over the last N days.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def daily_stats(request):
    """Get spending per day for a recent window."""
    params = _validated_params(request, DailyQuerySerializer)
    days = params.pop('days')
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.daily_stats(purchases, days=days))


@extend_schema(
    parameters=FILTER_PARAMETERS + [
        OpenApiParameter('granularity', OpenApiTypes.STR, description="'day', 'week' or 'month' (default)"),
    ],
    responses={200: TrendPointSerializer(many=True)},
    description="Purchase count and amount over time for charts.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def trend(request):
    """Get a time series of spending."""
    params = _validated_params(request, TrendQuerySerializer)
    granularity = params.pop('granularity')
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.trend(purchases, granularity=granularity))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: DashboardResponseSerializer},
    description="Summary with category, store and monthly tables in one call.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Get all dashboard statistics."""
    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)
    return Response(StatisticsQueries.dashboard(purchases))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={(200, 'text/csv'): OpenApiTypes.STR},
    description="Download a statistics table (categories, stores or monthly) as CSV.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def export_csv(request, report):
    """Export one statistics table as a CSV attachment."""
    if report not in CSV_REPORTS:
        raise InvalidReportError()

    params = _validated_params(request)
    purchases = filter_purchases(owner=request.user, **params)

    # BOM so spreadsheet apps detect UTF-8
    content = '\ufeff' + render_csv_report(report, purchases)
    filename = f"{report}_stats_{timezone.localdate().isoformat()}.csv"

    response = HttpResponse(content, content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
