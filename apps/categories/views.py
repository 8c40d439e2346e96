from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Category
from .serializers import (
    CategorySerializer,
    CategoryFilterSerializer,
    CategoryRemovalResponseSerializer,
)
from .services import list_categories, create_category, update_category, remove_category


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter(
                'include_inactive',
                OpenApiTypes.BOOL,
                description='Also list deactivated categories'
            ),
        ],
        tags=['categories'],
    ),
    create=extend_schema(tags=['categories']),
    retrieve=extend_schema(tags=['categories']),
    update=extend_schema(tags=['categories']),
    partial_update=extend_schema(tags=['categories']),
    destroy=extend_schema(
        responses={200: CategoryRemovalResponseSerializer, 204: None},
        description="Delete an unused category, or deactivate one that purchases still reference.",
        tags=['categories'],
    ),
)
class CategoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for purchase categories.

    list: Active categories ordered by sort order and name
    create: Add a category
    retrieve: Get a category (active or not)
    update: Update a category, including reactivation
    destroy: Delete, or deactivate when purchases reference it
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = CategoryFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        return list_categories(
            include_inactive=filter_serializer.validated_data['include_inactive']
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = create_category(**serializer.validated_data)

        return Response(
            CategorySerializer(category).data,
            status=status.HTTP_201_CREATED
        )

    def perform_update(self, serializer):
        update_category(category=serializer.instance, **serializer.validated_data)

    def destroy(self, request, *args, **kwargs):
        category = self.get_object()

        if remove_category(category=category):
            return Response({
                'message': 'Category deactivated (has existing purchases)',
                'deactivated': True,
            })

        return Response(status=status.HTTP_204_NO_CONTENT)
