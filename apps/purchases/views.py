from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Purchase
from .serializers import (
    PurchaseSerializer,
    PurchaseWriteSerializer,
    PurchaseFilterSerializer,
    PurchaseExportSerializer,
    PurchaseExportResponseSerializer,
)
from .services import filter_purchases, create_purchase, update_purchase, delete_purchase
from .permissions import IsPurchaseOwner
from .exceptions import InactiveCategoryError


PURCHASE_FILTER_PARAMETERS = [
    OpenApiParameter('category', OpenApiTypes.INT, description='Filter by category ID'),
    OpenApiParameter('store', OpenApiTypes.INT, description='Filter by store ID'),
    OpenApiParameter('date_from', OpenApiTypes.DATE, description='Purchases on or after (YYYY-MM-DD)'),
    OpenApiParameter('date_to', OpenApiTypes.DATE, description='Purchases on or before (YYYY-MM-DD)'),
    OpenApiParameter('search', OpenApiTypes.STR, description='Search in product name and characteristic'),
]


class PurchasePagination(PageNumberPagination):
    """Page sizes come from settings at request time."""
    page_size_query_param = 'page_size'

    @property
    def page_size(self):
        return settings.PURCHASES_PAGE_SIZE

    @property
    def max_page_size(self):
        return settings.PURCHASES_MAX_PAGE_SIZE


@extend_schema_view(
    list=extend_schema(parameters=PURCHASE_FILTER_PARAMETERS, tags=['purchases']),
    create=extend_schema(
        request=PurchaseWriteSerializer,
        responses={201: PurchaseSerializer},
        tags=['purchases'],
    ),
    retrieve=extend_schema(tags=['purchases']),
    update=extend_schema(
        request=PurchaseWriteSerializer,
        responses={200: PurchaseSerializer},
        tags=['purchases'],
    ),
    partial_update=extend_schema(
        request=PurchaseWriteSerializer,
        responses={200: PurchaseSerializer},
        tags=['purchases'],
    ),
    destroy=extend_schema(tags=['purchases']),
)
class PurchaseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's purchases.

    list: Purchases newest first (filterable, paginated)
    create: Record a purchase
    retrieve: Get a purchase
    update: Update a purchase (amount recalculated unless given)
    destroy: Delete a purchase
    export: Download purchases as JSON
    """

    queryset = Purchase.objects.select_related('store__locality', 'category')
    serializer_class = PurchaseSerializer
    permission_classes = [IsAuthenticated, IsPurchaseOwner]
    pagination_class = PurchasePagination

    def get_queryset(self):
        """Scope to the current user and apply validated filters."""
        if self.action not in ('list', 'export'):
            return super().get_queryset().filter(owner=self.request.user)

        filter_serializer = PurchaseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        return filter_purchases(owner=self.request.user, **filter_serializer.validated_data)

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action in ('create', 'update', 'partial_update'):
            return PurchaseWriteSerializer
        return PurchaseSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            purchase = create_purchase(owner=request.user, **serializer.validated_data)
        except InactiveCategoryError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            PurchaseSerializer(purchase).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        purchase = self.get_object()
        serializer = self.get_serializer(purchase, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            purchase = update_purchase(purchase=purchase, **serializer.validated_data)
        except InactiveCategoryError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(PurchaseSerializer(purchase).data)

    def perform_destroy(self, instance):
        delete_purchase(purchase=instance)

    @extend_schema(
        parameters=PURCHASE_FILTER_PARAMETERS,
        responses={200: PurchaseExportResponseSerializer},
        description="Download the current user's purchases as a JSON file.",
        tags=['purchases'],
    )
    @action(detail=False, methods=['get'])
    def export(self, request):
        """
        Export purchases as a JSON attachment.

        GET /api/purchases/export/
        """
        purchases = self.get_queryset()
        rows = PurchaseExportSerializer(purchases, many=True).data

        response = Response({
            'exported_at': timezone.now(),
            'count': len(rows),
            'data': rows,
        })
        response['Content-Disposition'] = 'attachment; filename="purchases_export.json"'
        return response
