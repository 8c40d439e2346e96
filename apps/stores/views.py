from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Locality, Store
from .serializers import LocalitySerializer, StoreSerializer, StoreFilterSerializer
from .services import (
    list_localities,
    list_stores,
    create_locality,
    create_store,
    update_instance,
    delete_locality,
    delete_store,
)
from .exceptions import LocalityInUseError, StoreInUseError


@extend_schema_view(
    list=extend_schema(tags=['cities']),
    create=extend_schema(tags=['cities']),
    retrieve=extend_schema(tags=['cities']),
    update=extend_schema(tags=['cities']),
    partial_update=extend_schema(tags=['cities']),
    destroy=extend_schema(tags=['cities']),
)
class LocalityViewSet(viewsets.ModelViewSet):
    """
    ViewSet for cities.

    list: All cities ordered by name
    create: Add a city (town_ru and code are required)
    retrieve: Get a city
    update: Update a city
    destroy: Delete a city that has no stores
    stores: Stores located in a city
    """

    queryset = Locality.objects.all()
    serializer_class = LocalitySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return list_localities()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        locality = create_locality(**serializer.validated_data)

        return Response(
            LocalitySerializer(locality).data,
            status=status.HTTP_201_CREATED
        )

    def perform_update(self, serializer):
        update_instance(serializer.instance, **serializer.validated_data)

    def destroy(self, request, *args, **kwargs):
        """Delete a city unless stores are still located in it."""
        locality = self.get_object()

        try:
            delete_locality(locality=locality)
        except LocalityInUseError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: StoreSerializer(many=True)}, tags=['cities'])
    @action(detail=True, methods=['get'])
    def stores(self, request, pk=None):
        """Get all stores located in this city."""
        locality = self.get_object()
        stores = list_stores(locality_id=locality.id)
        return Response(StoreSerializer(stores, many=True).data)


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter('locality', OpenApiTypes.INT, description='Filter by city ID'),
        ],
        tags=['stores'],
    ),
    create=extend_schema(tags=['stores']),
    retrieve=extend_schema(tags=['stores']),
    update=extend_schema(tags=['stores']),
    partial_update=extend_schema(tags=['stores']),
    destroy=extend_schema(tags=['stores']),
)
class StoreViewSet(viewsets.ModelViewSet):
    """
    ViewSet for stores.

    list: All stores ordered by name (filterable by city)
    create: Add a store (shop, street, house and locality are required)
    retrieve: Get a store
    update: Update a store
    destroy: Delete a store that has no purchases
    """

    queryset = Store.objects.select_related('locality')
    serializer_class = StoreSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        """Filter stores using input serializer validation."""
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = StoreFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        return list_stores(locality_id=filter_serializer.validated_data.get('locality'))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = create_store(**serializer.validated_data)

        return Response(
            StoreSerializer(store).data,
            status=status.HTTP_201_CREATED
        )

    def perform_update(self, serializer):
        update_instance(serializer.instance, **serializer.validated_data)

    def destroy(self, request, *args, **kwargs):
        """Delete a store unless purchases reference it."""
        store = self.get_object()

        try:
            delete_store(store=store)
        except StoreInUseError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
