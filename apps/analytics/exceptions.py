"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidGranularityError

    InvalidReportError (HTTP 404, raised directly by views)

Usage:
    from apps.analytics.exceptions import InvalidGranularityError

    if granularity not in GRANULARITIES:
        raise InvalidGranularityError(f"Invalid granularity: {granularity}")
"""
from rest_framework.exceptions import APIException


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views can catch it to turn any analytics error into a 400:

        try:
            data = StatisticsQueries.trend(purchases, granularity='year')
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidGranularityError(AnalyticsServiceError):
    """
    Raised when an invalid time granularity is specified.

    Valid granularities are: day, week, month.
    """

    pass


class InvalidReportError(APIException):
    """Unknown CSV report name."""
    status_code = 404
    default_detail = 'Unknown report. Valid reports: categories, stores, monthly.'
    default_code = 'invalid_report'
